"""Entrypoint da aplicação Ponte Mensageria.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import (
    create_channel_store,
    create_message_backend,
    create_receive_events_use_case,
    create_registry,
    create_send_outbound_use_case,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from api.handlers import HandlerRegistry
    from app.protocols.backend import MessageBackendProtocol
    from app.protocols.channel_store import ChannelStoreProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def install_dependencies(
    fastapi_app: FastAPI,
    registry: HandlerRegistry,
    channel_store: ChannelStoreProtocol,
    backend: MessageBackendProtocol,
) -> None:
    """Publica registry, stores e use cases em app.state."""
    fastapi_app.state.registry = registry
    fastapi_app.state.channel_store = channel_store
    fastapi_app.state.backend = backend
    fastapi_app.state.receive_use_case = create_receive_events_use_case(registry, channel_store, backend)
    fastapi_app.state.send_use_case = create_send_outbound_use_case(registry, backend)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings e monta dependências (se não injetadas).
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    if getattr(app.state, "registry", None) is None:
        install_dependencies(
            app,
            registry=create_registry(),
            channel_store=create_channel_store(),
            backend=create_message_backend(),
        )
    logger.info(
        "handlers_registered",
        extra={"channel_types": app.state.registry.channel_types()},
    )

    yield

    logger.info("app_shutting_down", extra={"service": service_name})


def create_app(
    registry: HandlerRegistry | None = None,
    channel_store: ChannelStoreProtocol | None = None,
    backend: MessageBackendProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Dependências podem ser injetadas (testes e hosts embarcando o adapter);
    se omitidas, são criadas no startup a partir das settings.
    """
    fastapi_app = FastAPI(
        title="Ponte Mensageria",
        description="Adapter bidirecional entre provedores de mensageria e eventos canônicos",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.registry = None

    if registry is not None:
        install_dependencies(
            fastapi_app,
            registry=registry,
            channel_store=channel_store if channel_store is not None else create_channel_store(),
            backend=backend if backend is not None else create_message_backend(),
        )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Ponte Mensageria in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ChannelAdapterError,
    ChannelNotFoundError,
    ConfigurationError,
    HandlerNotFoundError,
    IdentityError,
    InvalidJsonError,
    MessageNotFoundError,
    PayloadSchemaError,
    RequestValidationError,
    TimestampError,
)

__all__ = [
    "ChannelAdapterError",
    "ChannelNotFoundError",
    "ConfigurationError",
    "HandlerNotFoundError",
    "IdentityError",
    "InvalidJsonError",
    "MessageNotFoundError",
    "PayloadSchemaError",
    "RequestValidationError",
    "TimestampError",
]

"""Fakes compartilhados pelos testes."""

"""Observabilidade: logging JSON estruturado e correlation_id."""

"""Observability: structured logging for the taskboard core."""

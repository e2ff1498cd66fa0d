"""Ports (interfaces) the application layer depends on."""

from .services import CpnWriterPort, LoggerPort

__all__ = [
    "CpnWriterPort",
    "LoggerPort",
]

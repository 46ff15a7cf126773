"""CLI commands for midipump."""

from .config import config_group
from .midi import list_ports, monitor, send_group

__all__ = ["config_group", "list_ports", "monitor", "send_group"]

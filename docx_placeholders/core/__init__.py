"""Core configuration and logging components."""

from docx_placeholders.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]

"""Settings and logging shared by the whole package."""

from buildtask.core.config import Settings, get_settings
from buildtask.core.logging import configure_logging

__all__ = ["Settings", "get_settings", "configure_logging"]

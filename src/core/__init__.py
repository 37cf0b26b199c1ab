from core.config import Configuration, ConfigurationError
from core.context import ProcessedMarkers, RunContext
from core.utils import debug, info, warn, error

__all__ = [
    "Configuration",
    "ConfigurationError",
    "ProcessedMarkers",
    "RunContext",
    "debug",
    "info",
    "warn",
    "error",
]

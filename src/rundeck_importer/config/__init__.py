from .settings import Settings, RundeckSettings, LogLevel, DEFAULT_API_VERSION

__all__ = [
    "Settings",
    "RundeckSettings",
    "LogLevel",
    "DEFAULT_API_VERSION",
]

from .connection import ConnectionConfig
from .resources import *

__all__ = [
    "ConnectionConfig",
    "ResourceKind",
    "RemoteProject",
    "RemoteJob",
    "CanonicalResource",
    "PROVIDER_NAME",
]

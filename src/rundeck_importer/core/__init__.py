from .exceptions import *
from .base_client import BaseClient
from .utils import *

__all__ = [
    "BaseClient",
    "RundeckImporterException",
    "ConfigurationException",
    "ClientConnectionException",
    "TransportException",
    "DecodeException",
    "DiscoveryException",
    "UnsupportedServiceKind",
    "setup_logging",
    "sanitize_name",
    "join_name_parts",
]

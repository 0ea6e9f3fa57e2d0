"""Custom exceptions for the Rundeck importer."""

from typing import Optional, Dict, Any


class RundeckImporterException(Exception):
    """Base exception for the Rundeck importer."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(RundeckImporterException):
    """Raised when configuration is missing or inconsistent."""
    pass


class ClientConnectionException(RundeckImporterException):
    """Raised when a client is used without a usable connection."""
    
    def __init__(self, client_type: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.client_type = client_type
        super().__init__(f"{client_type} connection failed: {message}", details)


class TransportException(RundeckImporterException):
    """Raised on network failures and non-200 responses."""
    
    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.url = url
        self.status_code = status_code
        self.body = body
        details = {"url": url}
        if status_code is not None:
            details["status_code"] = status_code
            details["body"] = body
        super().__init__(message, details)


class DecodeException(RundeckImporterException):
    """Raised when a response body cannot be decoded into records."""
    
    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to decode response from {url}: {message}", {"url": url})


class DiscoveryException(RundeckImporterException):
    """Raised when discovery operations fail."""
    
    def __init__(self, discovery_type: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.discovery_type = discovery_type
        super().__init__(f"Discovery failed for {discovery_type}: {message}", details)


class UnsupportedServiceKind(RundeckImporterException):
    """Raised when a discovery kind is not offered by the provider."""
    
    def __init__(self, provider: str, kind: str):
        self.provider = provider
        self.kind = kind
        super().__init__(f"{provider}: {kind} not supported service")

"""Rundeck HTTP API client."""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import structlog

from rundeck_importer.core.base_client import BaseClient
from rundeck_importer.core.exceptions import (
    ClientConnectionException,
    DecodeException,
    TransportException,
)
from rundeck_importer.models.connection import ConnectionConfig

logger = structlog.get_logger(__name__)

AUTH_TOKEN_HEADER = "X-Rundeck-Auth-Token"

PROJECTS_PATH = "projects"
PROJECT_JOBS_PATH = "project/{project}/jobs"
SYSTEM_INFO_PATH = "system/info"


def build_async_client(config: ConnectionConfig, **kwargs: Any) -> httpx.AsyncClient:
    """Create the shared ``httpx.AsyncClient`` for a Rundeck server.
    
    TLS verification follows ``config.insecure``; extra keyword arguments
    (e.g. ``transport`` in tests) are passed through.
    """
    return httpx.AsyncClient(
        verify=not config.insecure,
        headers={"Accept": "application/json"},
        **kwargs,
    )


class RundeckClient(BaseClient):
    """Client for read-only Rundeck API calls."""
    
    def __init__(self, config: ConnectionConfig, http_client: Optional[httpx.AsyncClient] = None):
        super().__init__("RundeckClient")
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None
    
    async def connect(self) -> None:
        """Create the HTTP client unless one was injected."""
        if self._client is None:
            self._client = build_async_client(self.config)
            self._owns_client = True
        self._connected = True
        self.logger.info("Rundeck client connected", url=self.config.url, api_version=self.config.api_version)
    
    async def disconnect(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
        self._connected = False
        self.logger.info("Rundeck client disconnected")
    
    async def health_check(self) -> bool:
        """Check that the server answers the system info endpoint."""
        try:
            await self.get_json(SYSTEM_INFO_PATH)
            return True
        except (ClientConnectionException, TransportException, DecodeException) as e:
            self.logger.warning("Rundeck health check failed", error=str(e))
            return False
    
    def _auth(self) -> Dict[str, Any]:
        """Request options for exactly one auth mechanism, token first."""
        if self.config.uses_token:
            return {"headers": {AUTH_TOKEN_HEADER: self.config.token}}
        if self.config.uses_basic_auth:
            return {"auth": httpx.BasicAuth(self.config.username, self.config.password)}
        return {}
    
    async def get_json(self, path: str) -> Any:
        """GET an API path and return the decoded JSON payload."""
        if not self._connected or self._client is None:
            raise ClientConnectionException("Rundeck", "Client not connected")
        
        url = self.config.api_url(path)
        self.logger.debug("Requesting Rundeck API", url=url)
        
        try:
            response = await self._client.get(url, **self._auth())
        except httpx.HTTPError as e:
            raise TransportException(url, f"API request failed: {e}") from e
        
        if response.status_code != httpx.codes.OK:
            raise TransportException(
                url,
                f"API request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        
        try:
            return response.json()
        except ValueError as e:
            raise DecodeException(url, str(e)) from e
    
    async def list_projects(self) -> Any:
        """Raw project records."""
        return await self.get_json(PROJECTS_PATH)
    
    async def list_jobs(self, project: str) -> Any:
        """Raw job records for one project."""
        return await self.get_json(PROJECT_JOBS_PATH.format(project=quote(project, safe="")))

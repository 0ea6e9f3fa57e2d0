"""Rundeck provider: connection settings and the discovery kinds it offers."""

from typing import Any, Dict, List, Optional, Sequence, Type

import httpx
import structlog

from rundeck_importer.clients.rundeck import RundeckClient
from rundeck_importer.core.exceptions import ConfigurationException, DiscoveryException, UnsupportedServiceKind
from rundeck_importer.discovery.base import BaseDiscoveryService
from rundeck_importer.discovery.job_discovery import JobDiscoveryService
from rundeck_importer.discovery.project_discovery import ProjectDiscoveryService
from rundeck_importer.mappers.resource_mapper import ResourceDataMapper, no_dependencies, owning_project
from rundeck_importer.models.connection import ConnectionConfig
from rundeck_importer.models.resources import PROVIDER_NAME, CanonicalResource

logger = structlog.get_logger(__name__)

PROVIDER_ARG_NAMES = ("url", "token", "username", "password", "api_version", "insecure")


class RundeckProvider:
    """
    Composition root for Rundeck discovery.
    
    The provider starts unconfigured. ``configure`` stores the six ordered
    connection values; afterwards ``select_service`` hands a typed
    ``ConnectionConfig`` to the generator for the requested kind.
    """
    
    def __init__(self, link_projects: bool = False, http_client: Optional[httpx.AsyncClient] = None):
        self.link_projects = link_projects
        self.http_client = http_client
        self._config: Optional[ConnectionConfig] = None
        self.logger = logger.bind(provider=PROVIDER_NAME)
    
    @property
    def is_configured(self) -> bool:
        return self._config is not None
    
    @property
    def connection_config(self) -> ConnectionConfig:
        if self._config is None:
            raise ConfigurationException(f"{PROVIDER_NAME} provider is not configured")
        return self._config
    
    def configure(self, args: Sequence[str]) -> None:
        """Store url, token, username, password, api_version and the insecure flag."""
        if len(args) < len(PROVIDER_ARG_NAMES):
            raise ConfigurationException(
                f"{PROVIDER_NAME} provider expects {len(PROVIDER_ARG_NAMES)} arguments, got {len(args)}",
                {"expected": list(PROVIDER_ARG_NAMES)},
            )
        url, token, username, password, api_version, insecure = args[:len(PROVIDER_ARG_NAMES)]
        self._config = ConnectionConfig(
            url=url,
            token=token,
            username=username,
            password=password,
            api_version=api_version,
            insecure=insecure == "true",
        )
        self.logger.debug("Provider configured", url=self._config.url, api_version=self._config.api_version)
    
    def get_name(self) -> str:
        return PROVIDER_NAME
    
    def get_config(self) -> Dict[str, Any]:
        return self.connection_config.as_args()
    
    def get_basic_config(self) -> Dict[str, Any]:
        return self.get_config()
    
    def get_provider_data(self, *args: str) -> Dict[str, Any]:
        return {}
    
    def supported_services(self) -> Dict[str, Type[BaseDiscoveryService]]:
        return {
            "jobs": JobDiscoveryService,
            "projects": ProjectDiscoveryService,
        }
    
    def resource_connections(self) -> Dict[str, Dict[str, List[str]]]:
        """Cross-resource references declared to the emission step."""
        if self.link_projects:
            return {"jobs": {"projects": ["project", "name"]}}
        return {}
    
    def select_service(
        self,
        kind: str,
        verbose: bool = False,
        client: Optional[RundeckClient] = None,
    ) -> BaseDiscoveryService:
        """Build the generator for ``kind`` carrying the stored configuration."""
        services = self.supported_services()
        if kind not in services:
            raise UnsupportedServiceKind(self.get_name(), kind)
        
        config = self.connection_config
        mapper = ResourceDataMapper(
            provider_tag=self.get_name(),
            dependency_policy=owning_project if self.link_projects else no_dependencies,
        )
        return services[kind](
            config,
            client=client or RundeckClient(config, self.http_client),
            mapper=mapper,
            name=kind,
            verbose=verbose,
            provider_name=self.get_name(),
        )
    
    async def discover_with_metadata(self, kind: str, verbose: bool = False) -> Dict[str, Any]:
        """Run one discovery kind end to end and return its result envelope."""
        service = self.select_service(kind, verbose=verbose)
        async with service.client:
            return await service.discover_with_metadata()
    
    async def discover(self, kind: str, verbose: bool = False) -> List[CanonicalResource]:
        """Run one discovery kind; a failed run raises ``DiscoveryException``."""
        result = await self.discover_with_metadata(kind, verbose=verbose)
        if result["status"] != "success":
            raise DiscoveryException(kind, result["error"])
        return result["data"]
    
    async def health_check(self) -> bool:
        """Check that the configured server answers."""
        async with RundeckClient(self.connection_config, self.http_client) as client:
            return await client.health_check()

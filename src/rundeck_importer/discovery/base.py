"""Base discovery service interface."""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
import structlog
from datetime import datetime, timezone

from rundeck_importer.clients.rundeck import RundeckClient
from rundeck_importer.core.exceptions import RundeckImporterException
from rundeck_importer.mappers.resource_mapper import ResourceDataMapper
from rundeck_importer.models.connection import ConnectionConfig
from rundeck_importer.models.resources import PROVIDER_NAME, CanonicalResource

logger = structlog.get_logger(__name__)


class BaseDiscoveryService(ABC):
    """Abstract base class for all discovery services."""
    
    def __init__(
        self,
        config: ConnectionConfig,
        client: Optional[RundeckClient] = None,
        mapper: Optional[ResourceDataMapper] = None,
        name: Optional[str] = None,
        verbose: bool = False,
        provider_name: str = PROVIDER_NAME,
    ):
        self.config = config
        self.client = client or RundeckClient(config)
        self.mapper = mapper or ResourceDataMapper(provider_tag=provider_name)
        self.name = name or self.get_discovery_type()
        self.verbose = verbose
        self.provider_name = provider_name
        self.resources: List[CanonicalResource] = []
        self.logger = logger.bind(service=self.__class__.__name__)
        self._discovery_metadata = {
            'start_time': None,
            'end_time': None,
            'duration_seconds': None,
            'resources_discovered': 0,
            'errors': []
        }
    
    @abstractmethod
    async def discover(self) -> List[CanonicalResource]:
        """Perform discovery operation."""
        pass
    
    @abstractmethod
    def get_discovery_type(self) -> str:
        """Get the type of discovery this service performs."""
        pass
    
    async def _ensure_connected(self) -> None:
        if not self.client.is_connected:
            await self.client.connect()
    
    async def discover_with_metadata(self) -> Dict[str, Any]:
        """Perform discovery with metadata tracking."""
        self._discovery_metadata['start_time'] = datetime.now(timezone.utc)
        self._discovery_metadata['errors'] = []
        
        try:
            results = await self.discover()
            self._discovery_metadata['resources_discovered'] = len(results)
            status = 'success'
            error = None
            
        except RundeckImporterException as e:
            self.logger.error(f"Discovery failed for {self.get_discovery_type()}", error=str(e))
            results = []
            status = 'failed'
            error = str(e)
            self._discovery_metadata['errors'].append(error)
        
        finally:
            self._discovery_metadata['end_time'] = datetime.now(timezone.utc)
            if self._discovery_metadata['start_time']:
                duration = self._discovery_metadata['end_time'] - self._discovery_metadata['start_time']
                self._discovery_metadata['duration_seconds'] = duration.total_seconds()
        
        return {
            'type': self.get_discovery_type(),
            'status': status,
            'data': results,
            'error': error,
            'metadata': self._discovery_metadata.copy()
        }

"""Rundeck project discovery service."""

from typing import List
import structlog

from rundeck_importer.core.exceptions import DiscoveryException, RundeckImporterException
from rundeck_importer.discovery.base import BaseDiscoveryService
from rundeck_importer.models.resources import CanonicalResource, RemoteProject

logger = structlog.get_logger(__name__)


class ProjectDiscoveryService(BaseDiscoveryService):
    """Discovery service for Rundeck projects."""
    
    async def fetch_projects(self) -> List[RemoteProject]:
        """Fetch every project, in API order. Any failure is fatal."""
        await self._ensure_connected()
        
        try:
            payload = await self.client.list_projects()
            projects = self.mapper.parse_projects(payload, self.config.api_url("projects"))
        except RundeckImporterException as e:
            raise DiscoveryException("projects", f"failed to get projects: {e}") from e
        
        self.logger.info(f"Fetched {len(projects)} Rundeck projects")
        return projects
    
    async def discover(self) -> List[CanonicalResource]:
        """Discover Rundeck projects."""
        self.logger.info("Starting project discovery")
        
        projects = await self.fetch_projects()
        self.resources = self.mapper.map_projects(projects)
        
        self.logger.info(f"Discovered {len(self.resources)} project resources")
        return self.resources
    
    def get_discovery_type(self) -> str:
        """Get discovery type."""
        return "projects"

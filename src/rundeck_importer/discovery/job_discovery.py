"""Rundeck job discovery service."""

from typing import List, Optional
import structlog

from rundeck_importer.clients.rundeck import RundeckClient
from rundeck_importer.core.exceptions import RundeckImporterException
from rundeck_importer.discovery.base import BaseDiscoveryService
from rundeck_importer.discovery.project_discovery import ProjectDiscoveryService
from rundeck_importer.mappers.resource_mapper import ResourceDataMapper
from rundeck_importer.models.connection import ConnectionConfig
from rundeck_importer.models.resources import PROVIDER_NAME, CanonicalResource, RemoteJob

logger = structlog.get_logger(__name__)


class JobDiscoveryService(BaseDiscoveryService):
    """Discovery service for Rundeck jobs across all projects."""
    
    def __init__(
        self,
        config: ConnectionConfig,
        client: Optional[RundeckClient] = None,
        mapper: Optional[ResourceDataMapper] = None,
        name: Optional[str] = None,
        verbose: bool = False,
        provider_name: str = PROVIDER_NAME,
    ):
        super().__init__(config, client, mapper, name, verbose, provider_name)
        self.project_discovery = ProjectDiscoveryService(
            config, self.client, self.mapper, verbose=verbose, provider_name=provider_name
        )
        self.skipped_projects: List[str] = []
    
    async def fetch_jobs(self, project: str) -> List[RemoteJob]:
        """Fetch the jobs of one project, in API order."""
        payload = await self.client.list_jobs(project)
        return self.mapper.parse_jobs(payload, self.config.api_url(f"project/{project}/jobs"))
    
    async def discover(self) -> List[CanonicalResource]:
        """Discover jobs for every project.
        
        A project whose jobs cannot be fetched or decoded is skipped; the
        projects listing itself failing aborts the run.
        """
        self.logger.info("Starting job discovery")
        self.resources = []
        self.skipped_projects = []
        self._discovery_metadata['skipped_projects'] = self.skipped_projects
        
        projects = await self.project_discovery.fetch_projects()
        
        for project in projects:
            try:
                jobs = await self.fetch_jobs(project.name)
            except RundeckImporterException as e:
                self.skipped_projects.append(project.name)
                self._discovery_metadata['errors'].append(f"{project.name}: {e}")
                log = self.logger.warning if self.verbose else self.logger.debug
                log(f"Failed to get jobs for project {project.name}", project=project.name, error=str(e))
                continue
            
            self.resources.extend(self.mapper.map_jobs(jobs))
        
        self.logger.info(
            f"Discovered {len(self.resources)} job resources",
            projects=len(projects),
            skipped=len(self.skipped_projects),
        )
        return self.resources
    
    def get_discovery_type(self) -> str:
        """Get discovery type."""
        return "jobs"

from .base import BaseDiscoveryService
from .project_discovery import ProjectDiscoveryService
from .job_discovery import JobDiscoveryService

__all__ = [
    "BaseDiscoveryService",
    "ProjectDiscoveryService",
    "JobDiscoveryService",
]

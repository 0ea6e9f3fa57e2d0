"""Resource data mapping utilities."""

from typing import Any, Callable, Iterable, List, Optional

import structlog
from pydantic import ValidationError

from rundeck_importer.core.exceptions import DecodeException
from rundeck_importer.core.utils import join_name_parts, sanitize_name
from rundeck_importer.models.resources import (
    PROVIDER_NAME,
    CanonicalResource,
    RemoteJob,
    RemoteProject,
    ResourceKind,
)

logger = structlog.get_logger(__name__)

DependencyPolicy = Callable[[RemoteJob], List[str]]


def no_dependencies(job: RemoteJob) -> List[str]:
    """Jobs are emitted without references."""
    return []


def owning_project(job: RemoteJob) -> List[str]:
    """Reference the project a job belongs to by its remote id."""
    return [job.project] if job.project else []


def job_local_name(project: str, group: str, name: str) -> str:
    return join_name_parts([project, group, name])


def project_local_name(name: str) -> str:
    return sanitize_name(name)


class ResourceDataMapper:
    """Maps raw Rundeck records to canonical resources."""
    
    def __init__(self, provider_tag: str = PROVIDER_NAME, dependency_policy: Optional[DependencyPolicy] = None):
        self.provider_tag = provider_tag
        self.dependency_policy = dependency_policy or no_dependencies
    
    def parse_projects(self, payload: Any, source: str) -> List[RemoteProject]:
        """Decode a projects payload, keeping API order."""
        return self._parse(payload, RemoteProject, source)
    
    def parse_jobs(self, payload: Any, source: str) -> List[RemoteJob]:
        """Decode a jobs payload, keeping API order."""
        return self._parse(payload, RemoteJob, source)
    
    def _parse(self, payload: Any, model, source: str) -> list:
        # Missing fields decode to ""; non-array bodies and non-object items are decode errors.
        if not isinstance(payload, list):
            raise DecodeException(source, f"expected a JSON array, got {type(payload).__name__}")
        try:
            return [model.model_validate(item) for item in payload]
        except ValidationError as e:
            raise DecodeException(source, str(e)) from e
    
    def map_project(self, project: RemoteProject) -> CanonicalResource:
        return CanonicalResource(
            remote_id=project.name,
            local_name=project_local_name(project.name),
            kind=ResourceKind.PROJECT,
            provider_tag=self.provider_tag,
        )
    
    def map_job(self, job: RemoteJob) -> CanonicalResource:
        return CanonicalResource(
            remote_id=job.id,
            local_name=job_local_name(job.project, job.group, job.name),
            kind=ResourceKind.JOB,
            provider_tag=self.provider_tag,
            dependency_refs=self.dependency_policy(job),
        )
    
    def map_projects(self, projects: Iterable[RemoteProject]) -> List[CanonicalResource]:
        return [self.map_project(project) for project in projects]
    
    def map_jobs(self, jobs: Iterable[RemoteJob]) -> List[CanonicalResource]:
        return [self.map_job(job) for job in jobs]
    
    def normalize(self, kind: ResourceKind, remote_id: str, *identity_parts: str) -> CanonicalResource:
        """Build a canonical resource from a kind and its naming parts.
        
        Projects take a single name part; jobs take project, group and name.
        """
        if ResourceKind(kind) is ResourceKind.JOB:
            project, group, name = (list(identity_parts) + ["", "", ""])[:3]
            return self.map_job(RemoteJob(id=remote_id, project=project, group=group, name=name))
        return CanonicalResource(
            remote_id=remote_id,
            local_name=project_local_name(identity_parts[0] if identity_parts else remote_id),
            kind=ResourceKind.PROJECT,
            provider_tag=self.provider_tag,
        )

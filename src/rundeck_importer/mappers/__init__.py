from .resource_mapper import (
    ResourceDataMapper,
    DependencyPolicy,
    no_dependencies,
    owning_project,
    job_local_name,
    project_local_name,
)

__all__ = [
    "ResourceDataMapper",
    "DependencyPolicy",
    "no_dependencies",
    "owning_project",
    "job_local_name",
    "project_local_name",
]

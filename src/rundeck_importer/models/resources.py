"""Remote records and the canonical resource they are normalized into."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROVIDER_NAME = "rundeck"


class ResourceKind(str, Enum):
    PROJECT = "project"
    JOB = "job"


class RemoteRecord(BaseModel):
    """Base for records decoded from the Rundeck API."""
    
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    @field_validator('*', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class RemoteProject(RemoteRecord):
    """A project as listed by ``GET /api/{version}/projects``."""
    
    name: str = ""
    description: str = ""


class RemoteJob(RemoteRecord):
    """A job as listed by ``GET /api/{version}/project/{project}/jobs``."""
    
    id: str = ""
    name: str = ""
    project: str = ""
    group: str = ""
    description: str = ""


class CanonicalResource(BaseModel):
    """Normalized, provider-tagged resource ready for configuration emission."""
    
    model_config = ConfigDict(frozen=True, use_enum_values=True)
    
    remote_id: str
    local_name: str
    kind: ResourceKind
    provider_tag: str = PROVIDER_NAME
    dependency_refs: List[str] = Field(default_factory=list)

    @property
    def resource_type(self) -> str:
        """Terraform resource type, e.g. ``rundeck_job``."""
        return f"{self.provider_tag}_{self.kind}"

    def to_dict(self) -> dict:
        data = self.model_dump()
        data["resource_type"] = self.resource_type
        return data

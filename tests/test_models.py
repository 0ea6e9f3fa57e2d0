"""Tests for connection and resource models."""

import pytest
from pydantic import ValidationError

from rundeck_importer.models import (
    CanonicalResource,
    ConnectionConfig,
    RemoteJob,
    RemoteProject,
    ResourceKind,
)


def test_connection_config_defaults_api_version():
    config = ConnectionConfig(url="https://rundeck.local", token="t", api_version="")

    assert config.api_version == "38"
    assert config.insecure is False


def test_connection_config_builds_api_urls():
    config = ConnectionConfig(url="https://rundeck.local/", api_version="41")

    assert config.api_url("projects") == "https://rundeck.local/api/41/projects"
    assert config.api_url("/project/ops/jobs") == "https://rundeck.local/api/41/project/ops/jobs"


def test_connection_config_token_takes_priority():
    config = ConnectionConfig(url="u", token="t", username="admin", password="pw")

    assert config.uses_token
    assert not config.uses_basic_auth


def test_connection_config_basic_auth_needs_both_values():
    assert ConnectionConfig(url="u", username="admin", password="pw").uses_basic_auth
    assert not ConnectionConfig(url="u", username="admin").uses_basic_auth


def test_connection_config_is_immutable():
    config = ConnectionConfig(url="u")

    with pytest.raises(ValidationError):
        config.url = "other"


def test_remote_job_tolerates_missing_and_null_fields():
    job = RemoteJob.model_validate({"id": 42, "name": "Backup", "group": None, "href": "ignored"})

    assert job.id == "42"
    assert job.group == ""
    assert job.project == ""


def test_remote_records_default_missing_identity_to_empty():
    project = RemoteProject.model_validate({"description": "no name"})
    job = RemoteJob.model_validate({"name": "legacy", "project": "ops"})

    assert project.name == ""
    assert job.id == ""


def test_connection_config_keeps_url_as_given():
    config = ConnectionConfig(url="https://rundeck.local/")

    assert config.url == "https://rundeck.local/"
    assert config.as_args()["url"] == "https://rundeck.local/"


def test_canonical_resource_dict_includes_resource_type():
    resource = CanonicalResource(remote_id="j-1", local_name="ops_backup", kind=ResourceKind.JOB)

    data = resource.to_dict()

    assert data == {
        "remote_id": "j-1",
        "local_name": "ops_backup",
        "kind": "job",
        "provider_tag": "rundeck",
        "dependency_refs": [],
        "resource_type": "rundeck_job",
    }

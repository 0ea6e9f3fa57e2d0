"""Shared fixtures: a fake Rundeck API served through httpx.MockTransport."""

import json
from urllib.parse import unquote

import httpx
import pytest
import structlog

from rundeck_importer.clients.rundeck import RundeckClient, build_async_client
from rundeck_importer.models.connection import ConnectionConfig

BASE_URL = "https://rundeck.example.com"


class FakeRundeckAPI:
    """Routes ``/api/{version}/...`` requests to canned responses."""

    def __init__(self):
        self.projects = []
        self.jobs = {}
        self.failures = {}
        self.requests = []

    def add_project(self, name, jobs=None, description=""):
        self.projects.append({"name": name, "description": description})
        self.jobs[name] = jobs or []

    def fail(self, path, status_code=500, body="boom"):
        self.failures[path] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = unquote(request.url.path)
        prefix, _, endpoint = path.partition("/api/")
        _, _, endpoint = endpoint.partition("/")

        if endpoint in self.failures:
            status_code, body = self.failures[endpoint]
            if isinstance(body, str):
                return httpx.Response(status_code, text=body)
            return httpx.Response(status_code, content=body)
        if endpoint == "projects":
            return httpx.Response(200, json=self.projects)
        if endpoint.startswith("project/") and endpoint.endswith("/jobs"):
            project = endpoint[len("project/"):-len("/jobs")]
            if project in self.jobs:
                return httpx.Response(200, json=self.jobs[project])
        if endpoint == "system/info":
            return httpx.Response(200, json={"system": {"rundeck": {"version": "4.17.0"}}})
        return httpx.Response(404, text=json.dumps({"error": True, "message": "not found"}))


@pytest.fixture(autouse=True)
def reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_api():
    return FakeRundeckAPI()


@pytest.fixture
def connection_config():
    return ConnectionConfig(url=BASE_URL, token="secret-token", api_version="38")


@pytest.fixture
def http_client(fake_api, connection_config):
    return build_async_client(connection_config, transport=httpx.MockTransport(fake_api.handler))


@pytest.fixture
def rundeck_client(connection_config, http_client):
    return RundeckClient(connection_config, http_client)

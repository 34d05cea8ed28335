"""Shared test fixtures for gitlabctl."""

from __future__ import annotations

import io
import time
from datetime import datetime, timezone

import pytest
from rich.console import Console

from gitlabctl.core.gitlab_client import GitlabClientError
from gitlabctl.models.project import Deployment, Environment, EnvironmentDetail, Project

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def deployment(iid: int, user: str, sha: str, created_at: str = "2024-05-01T09:00:00Z") -> Deployment:
    return Deployment(iid=iid, deployer_username=user, commit_short_sha=sha, created_at=created_at)


class FakeGitlabClient:
    """In-memory stand-in for GitlabClient.

    ``environments`` maps project id to a list of environments or an exception;
    ``details`` maps (project id, environment id) to a detail or an exception.
    ``delays`` maps the same keys to seconds slept before answering, so tests can
    force completion order to differ from launch order.
    """

    def __init__(
        self,
        projects: list[Project] | Exception | None = None,
        environments: dict | None = None,
        details: dict | None = None,
        delays: dict | None = None,
    ):
        self.projects = projects if projects is not None else []
        self.environments = environments or {}
        self.details = details or {}
        self.delays = delays or {}
        self.connected = False

    def connect(self) -> None:
        self.connected = True

    def _answer(self, key, value):
        time.sleep(self.delays.get(key, 0))
        if isinstance(value, Exception):
            raise value
        return value

    def list_projects(self) -> list[Project]:
        return self._answer("projects", self.projects)

    def list_environments(self, project_id: int) -> list[Environment]:
        return self._answer(project_id, self.environments.get(project_id, []))

    def get_environment_detail(self, project_id: int, environment_id: int) -> EnvironmentDetail:
        key = (project_id, environment_id)
        if key not in self.details:
            raise GitlabClientError(f"404 environment {environment_id}")
        return self._answer(key, self.details[key])


@pytest.fixture
def fake_client() -> FakeGitlabClient:
    """Two projects in the payments namespace: billing drifted, ledger consistent."""
    billing = Project(id=1, name="billing", namespace="Payments")
    ledger = Project(id=2, name="ledger", namespace="payments")
    other = Project(id=3, name="website", namespace="marketing")
    staging = Environment(id=11, name="staging")
    production = Environment(id=12, name="production")
    review = Environment(id=13, name="review/feature-x")
    return FakeGitlabClient(
        projects=[billing, ledger, other],
        environments={
            1: [staging, production, review],
            2: [Environment(id=21, name="staging"), Environment(id=22, name="production")],
            3: [Environment(id=31, name="production")],
        },
        details={
            (1, 11): EnvironmentDetail(staging, deployment(42, "alice", "abc123")),
            (1, 12): EnvironmentDetail(production, deployment(41, "bob", "9f8e7d", "2024-04-29T12:00:00Z")),
            (1, 13): EnvironmentDetail(review, None),
            (2, 21): EnvironmentDetail(Environment(21, "staging"), deployment(7, "carol", "fedcba")),
            (2, 22): EnvironmentDetail(Environment(22, "production"), deployment(6, "carol", "fedcba")),
            (3, 31): EnvironmentDetail(Environment(31, "production"), deployment(3, "dave", "")),
        },
    )


@pytest.fixture
def plain_console() -> Console:
    """A console writing uncoloured text to a buffer."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


@pytest.fixture
def color_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=True, color_system="standard", width=200)

"""GitLab project, environment and deployment models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Project:
    id: int
    name: str = ""
    namespace: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Project:
        namespace = d.get("namespace") or {}
        if isinstance(namespace, dict):
            namespace = namespace.get("name", "")
        return cls(
            id=d.get("id", 0),
            name=d.get("name", ""),
            namespace=namespace or "",
        )


@dataclass(frozen=True)
class Environment:
    id: int
    name: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Environment:
        return cls(id=d.get("id", 0), name=d.get("name", ""))


@dataclass(frozen=True)
class Deployment:
    iid: int = 0
    deployer_username: str = ""
    commit_short_sha: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Deployment:
        user = d.get("user") or {}
        deployable = d.get("deployable") or {}
        commit = deployable.get("commit") or {}
        return cls(
            iid=d.get("iid", 0),
            deployer_username=user.get("username", ""),
            commit_short_sha=commit.get("short_id") or "",
            created_at=d.get("created_at") or "",
        )

    @property
    def label(self) -> str:
        return f"{self.iid} by {self.deployer_username}"


@dataclass(frozen=True)
class EnvironmentDetail:
    """An environment as returned by the single-environment endpoint."""

    environment: Environment
    last_deployment: Deployment | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> EnvironmentDetail:
        raw = d.get("last_deployment")
        return cls(
            environment=Environment.from_dict(d),
            last_deployment=Deployment.from_dict(raw) if raw else None,
        )


@dataclass(frozen=True)
class ProjectEnvironment:
    """An environment paired with the project it was listed under."""

    project_name: str
    project_id: int
    environment: Environment

"""Drift report models."""

from __future__ import annotations

from dataclasses import dataclass, field

from gitlabctl.models import FetchFailure


@dataclass(frozen=True)
class EnvironmentRow:
    project_name: str
    environment_name: str
    deployment_label: str = ""
    commit_sha: str = ""
    updated_label: str = ""

    @property
    def has_commit(self) -> bool:
        return bool(self.commit_sha)

    def cells(self) -> tuple[str, str, str, str, str]:
        return (
            self.project_name,
            self.environment_name,
            self.deployment_label,
            self.commit_sha,
            self.updated_label,
        )


@dataclass
class ProjectGroup:
    project_name: str
    rows: list[EnvironmentRow] = field(default_factory=list)

    @property
    def commits(self) -> set[str]:
        return {r.commit_sha for r in self.rows}

    @property
    def consistent(self) -> bool:
        return len(self.commits) <= 1

    @property
    def has_drift(self) -> bool:
        return not self.consistent


@dataclass
class DriftReport:
    groups: list[ProjectGroup] = field(default_factory=list)
    skipped: list[FetchFailure] = field(default_factory=list)

    @property
    def rows(self) -> list[EnvironmentRow]:
        return [r for g in self.groups for r in g.rows]

    @property
    def is_empty(self) -> bool:
        return not any(g.rows for g in self.groups)

    @property
    def drifted(self) -> list[ProjectGroup]:
        return [g for g in self.groups if g.has_drift]

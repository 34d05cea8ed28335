"""Turn resolved environments into display rows."""

from __future__ import annotations

from datetime import datetime

from gitlabctl.models.drift import EnvironmentRow
from gitlabctl.models.project import Deployment, EnvironmentDetail, ProjectEnvironment
from gitlabctl.utils.time_format import humanize_since, parse_rfc3339


def updated_label(deployment: Deployment | None, now: datetime | None = None) -> str:
    if deployment is None:
        return ""
    created = parse_rfc3339(deployment.created_at)
    if created is None:
        return ""
    return humanize_since(created, now)


def build_row(
    ref: ProjectEnvironment,
    detail: EnvironmentDetail,
    now: datetime | None = None,
) -> EnvironmentRow:
    """Combine a listed environment with its detail.

    Without ``now`` the current time is read for this row alone.
    """
    deployment = detail.last_deployment
    return EnvironmentRow(
        project_name=ref.project_name,
        environment_name=detail.environment.name or ref.environment.name,
        deployment_label=deployment.label if deployment else "",
        commit_sha=deployment.commit_short_sha if deployment else "",
        updated_label=updated_label(deployment, now),
    )

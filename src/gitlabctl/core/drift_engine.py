"""Group environment rows by project and detect commit drift."""

from __future__ import annotations

from itertools import groupby

from gitlabctl.models.drift import EnvironmentRow, ProjectGroup


def drop_undeployed(rows: list[EnvironmentRow]) -> list[EnvironmentRow]:
    """Remove rows without a commit; they have nothing to compare."""
    return [r for r in rows if r.has_commit]


def group_by_project(rows: list[EnvironmentRow]) -> list[ProjectGroup]:
    """Group maximal contiguous runs of the same project name.

    Order is preserved and this is not a partition: a project whose rows are
    interleaved with another's yields several groups.
    """
    return [
        ProjectGroup(project_name=name, rows=list(run))
        for name, run in groupby(rows, key=lambda r: r.project_name)
    ]


def classify(rows: list[EnvironmentRow]) -> list[ProjectGroup]:
    """Filter undeployed rows and group the rest; see ``ProjectGroup.consistent``."""
    return group_by_project(drop_undeployed(rows))

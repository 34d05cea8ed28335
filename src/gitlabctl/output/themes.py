"""Drift color map."""

from gitlabctl.models.drift import ProjectGroup

CONSISTENT_COLOR = "green"
DRIFTED_COLOR = "red"


def group_color(group: ProjectGroup) -> str:
    return CONSISTENT_COLOR if group.consistent else DRIFTED_COLOR

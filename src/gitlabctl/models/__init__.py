"""Data models for gitlabctl."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FetchStage(enum.Enum):
    PROJECTS = "projects"
    ENVIRONMENTS = "environments"


@dataclass(frozen=True)
class FetchFailure:
    """A fetch whose error was absorbed into an empty result."""

    stage: FetchStage
    target: str
    error: str = ""

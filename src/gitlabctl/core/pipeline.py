"""Run the staged fetch / aggregate pipeline behind the drift report."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable

from gitlabctl.core.drift_engine import classify
from gitlabctl.core.environment_store import EnvironmentStore
from gitlabctl.core.row_builder import build_row
from gitlabctl.models.drift import DriftReport

logger = logging.getLogger(__name__)

# (message, elapsed seconds)
ProgressCallback = Callable[[str, float], None]


def build_report(
    store: EnvironmentStore,
    namespace: str = "",
    now: datetime | None = None,
    on_progress: ProgressCallback | None = None,
) -> DriftReport:
    """Projects, then environments, then details; each stage completes first."""

    def progress(message: str, started: float) -> None:
        elapsed = time.perf_counter() - started
        logger.debug("%s in %.2fs", message, elapsed)
        if on_progress:
            on_progress(message, elapsed)

    started = time.perf_counter()
    projects, skipped = store.list_projects(namespace)
    progress(f"Retrieved {len(projects)} projects", started)

    started = time.perf_counter()
    environments, failures = store.list_environments(projects)
    skipped.extend(failures)
    progress(f"Retrieved {sum(len(e) for e in environments)} environments", started)

    started = time.perf_counter()
    resolved = store.resolve_details(environments)
    progress("Retrieved environment details", started)

    rows = [build_row(ref, detail, now) for ref, detail in resolved]
    return DriftReport(groups=classify(rows), skipped=skipped)

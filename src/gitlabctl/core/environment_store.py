"""Project, environment and deployment-detail fetch stages."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar

from gitlabctl.core.gitlab_client import GitlabClient, GitlabClientError
from gitlabctl.models import FetchFailure, FetchStage
from gitlabctl.models.project import EnvironmentDetail, Project, ProjectEnvironment

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def matches_namespace(project: Project, namespace: str) -> bool:
    """Case-insensitive exact match; an empty namespace matches everything."""
    return not namespace or project.namespace.casefold() == namespace.casefold()


class EnvironmentStore:
    """Runs the fan-out fetches against a shared client.

    Listing failures are absorbed as empty results and returned alongside the
    data; detail failures propagate.
    """

    def __init__(self, client: GitlabClient, max_workers: int = 8):
        self.client = client
        self.max_workers = max(1, max_workers)

    def _fan_out(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]:
        """Apply ``fn`` concurrently, returning results in input order."""
        items = list(items)
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(items))) as executor:
            return list(executor.map(fn, items))

    def list_projects(self, namespace: str = "") -> tuple[list[Project], list[FetchFailure]]:
        try:
            projects = self.client.list_projects()
        except GitlabClientError as e:
            logger.info("Project listing failed, continuing with none: %s", e)
            return [], [FetchFailure(FetchStage.PROJECTS, "projects", str(e))]
        selected = [p for p in projects if matches_namespace(p, namespace)]
        logger.debug("Kept %d of %d projects for namespace %r", len(selected), len(projects), namespace)
        return selected, []

    def _environments_of(
        self, project: Project,
    ) -> tuple[list[ProjectEnvironment], FetchFailure | None]:
        try:
            environments = self.client.list_environments(project.id)
        except GitlabClientError as e:
            logger.info("Environment listing failed for %s, skipping: %s", project.name, e)
            return [], FetchFailure(FetchStage.ENVIRONMENTS, project.name, str(e))
        return [ProjectEnvironment(project.name, project.id, env) for env in environments], None

    def list_environments(
        self, projects: list[Project],
    ) -> tuple[list[list[ProjectEnvironment]], list[FetchFailure]]:
        """One inner list per project, in project order."""
        outcomes = self._fan_out(self._environments_of, projects)
        environments = [envs for envs, _ in outcomes]
        failures = [f for _, f in outcomes if f is not None]
        return environments, failures

    def resolve_detail(self, ref: ProjectEnvironment) -> EnvironmentDetail:
        return self.client.get_environment_detail(ref.project_id, ref.environment.id)

    def resolve_details(
        self, environments: list[list[ProjectEnvironment]],
    ) -> list[tuple[ProjectEnvironment, EnvironmentDetail]]:
        """Fetch every environment's detail; the first failure aborts the stage."""
        refs = [ref for group in environments for ref in group]
        details = self._fan_out(self.resolve_detail, refs)
        return list(zip(refs, details))

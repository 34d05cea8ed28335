"""GitLab API wrapper."""

from __future__ import annotations

import logging

import gitlab
import requests
from gitlab.exceptions import GitlabError

from gitlabctl.config.settings import Settings
from gitlabctl.models.project import Environment, EnvironmentDetail, Project

logger = logging.getLogger(__name__)


class GitlabClientError(Exception):
    """Raised when a GitLab API call fails."""


class GitlabClient:
    """Thin wrapper around the python-gitlab client.

    One instance is shared read-only by every fetch task of a run.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._api: gitlab.Gitlab | None = None

    @property
    def api(self) -> gitlab.Gitlab:
        if self._api is None:
            self._api = gitlab.Gitlab(
                self.settings.server,
                private_token=self.settings.access_token,
                timeout=self.settings.timeout,
                ssl_verify=self.settings.ssl_verify,
            )
        return self._api

    def connect(self) -> None:
        """Authenticate against the server; fails fast on bad URL or token."""
        try:
            self.api.auth()
        except (GitlabError, requests.RequestException) as e:
            raise GitlabClientError(f"Could not connect to {self.settings.server}: {e}") from e

    def list_projects(self) -> list[Project]:
        # The v4 API has no namespace filter for /projects
        try:
            items = self.api.projects.list(get_all=True)
        except (GitlabError, requests.RequestException) as e:
            raise GitlabClientError(f"Failed to list projects: {e}") from e
        return [Project.from_dict(p.attributes) for p in items]

    def list_environments(self, project_id: int) -> list[Environment]:
        try:
            project = self.api.projects.get(project_id, lazy=True)
            items = project.environments.list(get_all=True)
        except (GitlabError, requests.RequestException) as e:
            raise GitlabClientError(
                f"Failed to list environments of project {project_id}: {e}"
            ) from e
        return [Environment.from_dict(e.attributes) for e in items]

    def get_environment_detail(self, project_id: int, environment_id: int) -> EnvironmentDetail:
        """Fetch one environment; only this endpoint embeds the last deployment."""
        logger.debug("Fetching environment %s of project %s", environment_id, project_id)
        try:
            project = self.api.projects.get(project_id, lazy=True)
            env = project.environments.get(environment_id)
        except (GitlabError, requests.RequestException) as e:
            raise GitlabClientError(
                f"Failed to get environment {environment_id} of project {project_id}: {e}"
            ) from e
        return EnvironmentDetail.from_dict(env.attributes)

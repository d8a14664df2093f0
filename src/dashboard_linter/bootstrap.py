"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from typing import Optional

from dashboard_linter.application.use_cases.check_pull_request import CheckPullRequestUseCase
from dashboard_linter.application.use_cases.lint_files import LintFilesUseCase
from dashboard_linter.config.models import LinterConfig
from dashboard_linter.domain.errors import ConfigurationError
from dashboard_linter.domain.ports.config_provider import ConfigProviderPort
from dashboard_linter.domain.ports.pull_request_source import PullRequestSourcePort
from dashboard_linter.infrastructure.config.json_config_provider import JsonConfigProvider
from dashboard_linter.infrastructure.github.client import GitHubClient


class Container:
    """Simple dependency injection container.

    Usage::

        with Container(token=os.environ["GITHUB_TOKEN"]) as container:
            outcome = container.check_pull_request().execute(files_url)
    """

    def __init__(
        self,
        token: Optional[str] = None,
        config_path: Optional[str] = None,
        source: Optional[PullRequestSourcePort] = None,
    ) -> None:
        self._config_provider: ConfigProviderPort = JsonConfigProvider(config_path)
        self._token = token
        self._source = source
        self._owns_source = False

    @property
    def config(self) -> LinterConfig:
        return self._config_provider.get_config()

    @property
    def source(self) -> PullRequestSourcePort:
        """The pull request source, created on first use."""
        if self._source is None:
            if not self._token:
                raise ConfigurationError("A GitHub token is required to read pull requests")
            self._source = GitHubClient(
                self._token,
                timeout=self.config.api_timeout,
                per_page=self.config.per_page,
            )
            self._owns_source = True
        return self._source

    # -- Use case factories ----------------------------------------------------

    def check_pull_request(self) -> CheckPullRequestUseCase:
        return CheckPullRequestUseCase(self.source, self.config)

    def lint_files(self) -> LintFilesUseCase:
        return LintFilesUseCase(self.config)

    # -- Lifecycle ---------------------------------------------------------------

    def close(self) -> None:
        if self._owns_source:
            self._source.close()
            self._owns_source = False

    def __enter__(self) -> Container:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

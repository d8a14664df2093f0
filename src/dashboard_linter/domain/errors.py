"""Domain errors — custom exceptions for the dashboard linter.

These exceptions are raised by infrastructure and application code and
caught by the presentation layer. They carry no infrastructure dependencies.
"""


class DashboardLinterError(Exception):
    """Base exception for all dashboard linter errors."""


class ConfigurationError(DashboardLinterError):
    """Raised when configuration is invalid or missing."""


class InvalidPullRequestUrlError(DashboardLinterError):
    """Raised when the pull request files URL is not an absolute http(s) URL."""


class FetchError(DashboardLinterError):
    """Raised when fetching data from the hosting API fails."""


class GitHubAPIError(FetchError):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(self, status_code: int, url: str, message: str = "") -> None:
        self.status_code = status_code
        self.url = url
        detail = f" - {message}" if message else ""
        super().__init__(f"GitHub API returned status {status_code} for {url}{detail}")


class DocumentLoadError(DashboardLinterError):
    """Raised when a dashboard document cannot be read or parsed as JSON."""

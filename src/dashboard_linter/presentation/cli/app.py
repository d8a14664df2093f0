"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from dashboard_linter.domain.errors import DashboardLinterError
from dashboard_linter.presentation.cli.formatters import (
    error_message,
    json_panel,
    rules_table,
    success_panel,
    warnings_table,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dashboard-linter",
    help="🔎 Flag deprecated fields in dashboard JSON changed by a pull request",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

config_app = typer.Typer(
    name="config",
    help="⚙️  Inspect the linter configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr at INFO, or DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Dashboard linter."""
    configure_logging(verbose)


# ---------------------------------------------------------------------------
# dashboard-linter check
# ---------------------------------------------------------------------------


@app.command()
def check(
    files_url: Annotated[
        Optional[str],
        typer.Argument(help="GitHub API URL listing the pull request files"),
    ] = None,
    token: Annotated[
        Optional[str],
        typer.Option("--token", envvar="GITHUB_TOKEN", help="GitHub token", show_default=False),
    ] = None,
    config: ConfigOption = None,
    output_file: Annotated[
        Optional[Path],
        typer.Option("--output-file", help="Step output file (defaults to $GITHUB_OUTPUT)"),
    ] = None,
) -> None:
    """Check the dashboards changed by a pull request and publish the comment."""
    from dashboard_linter.bootstrap import Container
    from dashboard_linter.infrastructure.actions.output import set_output

    if not token:
        logger.error("Missing GITHUB_TOKEN environment variable")
        error_message("Missing GITHUB_TOKEN environment variable")
        raise typer.Exit(code=1)

    if not files_url:
        logger.error("Missing pull request URL")
        error_message("Missing arguments. Example: dashboard-linter check <pull request url>")
        raise typer.Exit(code=1)

    try:
        with Container(token=token, config_path=config) as container:
            outcome = container.check_pull_request().execute(files_url)
            output_name = container.config.output_name
    except DashboardLinterError as exc:
        logger.error("Error: %s", exc)
        error_message(str(exc))
        raise typer.Exit(code=1)

    if outcome.comment is None:
        success_panel(f"✅ No warnings in {len(outcome.files_checked)} dashboard(s)")
        return

    warnings_table(outcome)
    try:
        written = set_output(output_name, outcome.comment, output_file)
    except OSError as exc:
        logger.error("Cannot write step output '%s': %s", output_name, exc)
        error_message(f"Cannot write step output '{output_name}': {exc}")
        raise typer.Exit(code=1)
    if not written:
        typer.echo(outcome.comment)


# ---------------------------------------------------------------------------
# dashboard-linter lint
# ---------------------------------------------------------------------------


@app.command()
def lint(
    paths: Annotated[list[Path], typer.Argument(help="Dashboard JSON files to lint")],
    config: ConfigOption = None,
    markdown: Annotated[
        bool, typer.Option("--markdown", help="Print the pull request comment instead")
    ] = False,
) -> None:
    """Lint local dashboard files; exits 1 when warnings are found."""
    from dashboard_linter.bootstrap import Container

    try:
        outcome = Container(config_path=config).lint_files().execute(paths)
    except DashboardLinterError as exc:
        logger.error("Error: %s", exc)
        error_message(str(exc))
        raise typer.Exit(code=1)

    if markdown and outcome.comment is not None:
        typer.echo(outcome.comment)
    else:
        warnings_table(outcome)

    if outcome.has_warnings:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# dashboard-linter rules
# ---------------------------------------------------------------------------


@app.command()
def rules() -> None:
    """Show the line rules and the warnings they raise."""
    from dashboard_linter.rules.constants import RULES

    rules_table(RULES)


# ---------------------------------------------------------------------------
# dashboard-linter config show
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration."""
    from dashboard_linter.bootstrap import Container

    try:
        cfg = Container(config_path=config).config
    except DashboardLinterError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    json_panel(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    app()

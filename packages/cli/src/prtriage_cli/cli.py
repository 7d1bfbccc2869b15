"""CLI entry point for prtriage.

Runs the triage loop for the reviewer named by GITHUB_USERNAME until the
process is stopped. There is one mode of operation; the only options select
the configuration file and print the version.
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
import requests
from github import Github, GithubException
from rich.logging import RichHandler

from prtriage_cli.auth import resolve_github_token
from prtriage_core.config import load_config
from prtriage_core.gh.actions import ActionExecutor
from prtriage_core.gh.pull_request import PullRequestSource
from prtriage_core.providers.openai import OpenAIReviewGenerator
from prtriage_core.triage import run_forever

logger = logging.getLogger("prtriage")


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        datefmt="[%Y-%m-%d %H:%M:%S]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


@click.command()
@click.version_option(
    version=importlib.metadata.version("prtriage"),
    prog_name="prtriage",
)
@click.option(
    "--config",
    "config_path",
    default=".prtriage.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRTRIAGE_CONFIG",
)
def main(config_path: str):
    """Triage pull requests assigned to you and approve the low-risk ones.

    \b
    Environment variables:
      GITHUB_USERNAME   Reviewer whose assigned pull requests are triaged
      GITHUB_TOKEN      GitHub personal access token (or use gh CLI)
      OPENAI_API_KEY    OpenAI API key used to generate the reviews
    """
    _configure_logging()

    config = load_config(config_path)
    token = resolve_github_token()
    if token:
        config["github_token"] = token

    client = Github(config["github_token"])
    source = PullRequestSource(client, config["github_username"], config["github_token"])
    generator = OpenAIReviewGenerator.from_config(config)
    executor = ActionExecutor(client)

    try:
        run_forever(source, generator, executor, interval=config["poll_interval"])
    except (GithubException, requests.RequestException) as e:
        # A failed poll ends the process; the dedupe set does not survive it.
        logger.error("Error fetching pull requests: %s", e)
        raise click.ClickException(f"Polling for assigned pull requests failed: {e}")

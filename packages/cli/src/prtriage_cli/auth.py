"""GitHub token resolution for the unattended triage process.

Why a gh CLI fallback:
- On a server or in a container, GITHUB_TOKEN is set by the service
  definition and always wins.
- On a developer machine, anyone already logged in with `gh auth login`
  can start `prtriage` without minting a personal access token.

Resolution order (stops at first success):
  1. GITHUB_TOKEN environment variable
  2. `gh auth token` (GitHub CLI session)
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)


def _token_from_gh_cli() -> str | None:
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        # gh not installed or hung
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_github_token() -> str | None:
    """Return a GitHub token, or None if neither source provides one.

    Never raises. A missing token is not rejected: the process starts, the
    first search for assigned pull requests fails, and the loop exits. The
    warning logged here is the only early sign of that.
    """
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token

    token = _token_from_gh_cli()
    if token:
        logger.debug("Resolved GitHub token via gh CLI session.")
        return token

    logger.warning("No GitHub token found in GITHUB_TOKEN or the gh CLI; GitHub requests will be unauthenticated.")
    return None

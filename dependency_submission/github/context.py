"""GitHub Actions runner context.

Reads the default environment variables the runner sets for every job and
the JSON payload of the triggering event. Used for the default correlator
and to attribute pull-request snapshots to the PR head commit instead of
the synthetic merge commit.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dependency_submission.errors import ConfigError

logger = logging.getLogger(__name__)

PULL_REQUEST_EVENTS = {"pull_request", "pull_request_target"}


class GitHubContext(BaseSettings):
    """Runner-provided environment (GITHUB_*, RUNNER_DEBUG)."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    github_workflow: str = ""
    github_job: str = ""
    github_action: str = ""
    github_event_name: str = ""
    github_event_path: str = ""
    github_sha: str = ""
    github_output: str = ""
    runner_debug: bool = False

    def default_correlator(self) -> str:
        return f"{self.github_workflow}_{self.github_job}_{self.github_action}"

    def load_event(self) -> dict:
        """Return the event payload, or {} when it is unavailable."""
        if not self.github_event_path:
            return {}
        path = Path(self.github_event_path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Could not read event payload %s: %s", path, exc)
            return {}
        return payload if isinstance(payload, dict) else {}

    @property
    def is_pull_request(self) -> bool:
        return self.github_event_name in PULL_REQUEST_EVENTS

    def pull_request_head_sha(self) -> Optional[str]:
        """Head commit of the triggering pull request, if any."""
        if not self.is_pull_request:
            return None
        pull_request = self.load_event().get("pull_request")
        head = pull_request.get("head") if isinstance(pull_request, dict) else None
        sha = head.get("sha") if isinstance(head, dict) else None
        return sha or None

    def commit_sha(self) -> str:
        """Commit the submitted snapshot should be attributed to."""
        return self.pull_request_head_sha() or self.github_sha

    def env_overlay(self, token: str) -> dict[str, str]:
        """Environment entries the build tool needs on top of the inherited env."""
        overlay = {"GITHUB_TOKEN": token}
        sha = self.commit_sha()
        if sha and sha != self.github_sha:
            logger.info(
                "Pull request event: attributing snapshot to head %s instead of %s",
                sha,
                self.github_sha or "<unset>",
            )
            overlay["GITHUB_SHA"] = sha
        return overlay


def load_context() -> GitHubContext:
    """Read the runner context from the environment.

    Raises:
        ConfigError: a runner variable has an unparseable value.
    """
    try:
        return GitHubContext()
    except ValidationError as exc:
        raise ConfigError(f"Invalid runner environment: {exc}") from exc

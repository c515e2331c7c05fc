"""Action entry point.

Loads the runner context and inputs, masks the token, runs the
orchestrator, and maps the outcome onto the job: `::error::` plus exit
code 1 on failure, step outputs on success.
"""

import logging

from dependency_submission.core.config import load_inputs
from dependency_submission.core.logging import configure_logging
from dependency_submission.errors import ConfigError
from dependency_submission.github.commands import set_failed, set_output, set_secret
from dependency_submission.github.context import GitHubContext, load_context
from dependency_submission.orchestrator import RunOutcome, run_submission

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        github = load_context()
    except ConfigError as exc:
        configure_logging()
        set_failed(f"configuration failed: {exc}")
        return 1

    configure_logging(debug=github.runner_debug)

    try:
        inputs = load_inputs()
    except ConfigError as exc:
        set_failed(f"configuration failed: {exc}")
        return 1
    set_secret(inputs.token)

    outcome = run_submission(inputs, github)
    if not outcome.is_success:
        set_failed(outcome.message)
        return 1

    _write_outputs(github, outcome)
    logger.info(outcome.message)
    return 0


def _write_outputs(github: GitHubContext, outcome: RunOutcome) -> None:
    plugin_file = str(outcome.plugin_file.path) if outcome.plugin_file else ""
    set_output("build-tool", outcome.workspace.kind.value, github.github_output)
    set_output("plugin-file", plugin_file, github.github_output)

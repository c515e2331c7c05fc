"""GitHub Actions integration: runner context and workflow commands."""

from dependency_submission.github.commands import set_failed, set_output, set_secret
from dependency_submission.github.context import GitHubContext, load_context

__all__ = ["GitHubContext", "load_context", "set_failed", "set_output", "set_secret"]

"""Submission orchestrator: classify → validate → inject → invoke.

State machine:
  START → CLASSIFIED → VALIDATED → INJECTED → INVOKED → SUCCEEDED
  any step error                                      → FAILED

Each step runs to completion before the next starts. A failing step stops
the run; nothing is retried. Errors from the taxonomy keep their type;
anything else is wrapped in UnknownError. The outcome records the last
state reached so the failure message can name the step that broke.

Mill workspaces pass through INJECTED without writing a file; their plugin
is imported on the Mill command line.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional, Sequence

import structlog

from dependency_submission.core.config import ActionInputs
from dependency_submission.detector import BuildTool, Workspace, classify, parse_precedence
from dependency_submission.errors import InvocationError, SubmissionError, UnknownError
from dependency_submission.execution import InvocationResult, invoke
from dependency_submission.github.context import GitHubContext
from dependency_submission.options import marshal
from dependency_submission.plugin import (
    SBT_PLUGIN_FAMILIES,
    PluginDescriptor,
    TransientPluginFile,
    inject,
)

log = structlog.get_logger(__name__)


class RunState(StrEnum):
    START = "start"
    CLASSIFIED = "classified"
    VALIDATED = "validated"
    INJECTED = "injected"
    INVOKED = "invoked"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# The step attempted from each state; named in failure messages.
NEXT_STEP: dict[RunState, str] = {
    RunState.START: "workspace classification",
    RunState.CLASSIFIED: "input validation",
    RunState.VALIDATED: "plugin injection",
    RunState.INJECTED: "build-tool invocation",
    RunState.INVOKED: "build-tool invocation",
}


@dataclass
class RunOutcome:
    """Result of one run. `reached` is the last state entered before the end."""

    state: RunState = RunState.START
    reached: RunState = RunState.START
    error: Optional[SubmissionError] = None
    workspace: Optional[Workspace] = None
    plugin_file: Optional[TransientPluginFile] = None
    invocation: Optional[InvocationResult] = None

    @property
    def is_success(self) -> bool:
        return self.state == RunState.SUCCEEDED

    @property
    def failed_step(self) -> Optional[str]:
        if self.state != RunState.FAILED:
            return None
        return NEXT_STEP.get(self.reached)

    @property
    def message(self) -> str:
        if self.is_success:
            return "Dependency snapshot submitted"
        return f"{self.failed_step} failed: {self.error}"

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "reached": self.reached.value,
            "error": str(self.error) if self.error else None,
            "error_type": type(self.error).__name__ if self.error else None,
            "workspace": self.workspace.to_dict() if self.workspace else None,
            "plugin_file": self.plugin_file.to_dict() if self.plugin_file else None,
            "invocation": self.invocation.to_dict() if self.invocation else None,
        }


def _enter(outcome: RunOutcome, state: RunState, **details) -> None:
    outcome.reached = state
    outcome.state = state
    log.info("state_transition", state=state.value, **details)


def _fail(outcome: RunOutcome, error: SubmissionError) -> RunOutcome:
    error.stage = NEXT_STEP.get(outcome.reached)
    outcome.state = RunState.FAILED
    outcome.error = error
    log.error(
        "run_failed",
        reached=outcome.reached.value,
        step=error.stage,
        error_type=type(error).__name__,
        error=str(error),
    )
    return outcome


def run_submission(
    inputs: ActionInputs,
    github: GitHubContext,
    precedence: Optional[Sequence[BuildTool]] = None,
) -> RunOutcome:
    """Provision the workspace and run the build tool's submission task.

    Never raises: every failure is returned as a FAILED outcome.
    """
    outcome = RunOutcome()

    try:
        order = tuple(precedence) if precedence else parse_precedence(
            inputs.build_tool_precedence
        )
        workspace = classify(Path(inputs.effective_base_dir), inputs.build_tool, order)
        outcome.workspace = workspace
        _enter(outcome, RunState.CLASSIFIED, kind=workspace.kind.value)

        options = marshal(
            inputs.option_inputs(),
            default_correlator=github.default_correlator(),
        )
        _enter(outcome, RunState.VALIDATED, generation=options.generation.value)

        if workspace.kind == BuildTool.SBT:
            descriptor = PluginDescriptor.for_generation(
                options.generation,
                inputs.effective_sbt_plugin_version,
            )
            outcome.plugin_file = inject(
                workspace,
                descriptor,
                SBT_PLUGIN_FAMILIES[options.generation].file_prefix,
            )
        _enter(
            outcome,
            RunState.INJECTED,
            plugin_file=str(outcome.plugin_file.path) if outcome.plugin_file else None,
        )

        invocation = invoke(
            workspace,
            options,
            inputs.effective_mill_plugin_version,
            github.env_overlay(inputs.token),
        )
        outcome.invocation = invocation
        _enter(outcome, RunState.INVOKED, exit_code=invocation.exit_code)

        if not invocation.is_success:
            raise InvocationError(
                f"{workspace.kind.value} exited with code {invocation.exit_code}",
                exit_code=invocation.exit_code,
            )
    except SubmissionError as exc:
        return _fail(outcome, exc)
    except Exception as exc:
        log.exception("unexpected_error", step=NEXT_STEP.get(outcome.reached))
        return _fail(outcome, UnknownError(exc))

    _enter(outcome, RunState.SUCCEEDED)
    return outcome

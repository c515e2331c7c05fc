"""Execution module: command probing, Mill provisioning, build-tool invocation."""

from dependency_submission.execution.invoker import (
    build_mill_command,
    build_sbt_command,
    invoke,
    run_build_tool,
)
from dependency_submission.execution.probe import command_exists
from dependency_submission.execution.types import InvocationResult, ProvisionResult

__all__ = [
    "build_mill_command",
    "build_sbt_command",
    "command_exists",
    "invoke",
    "run_build_tool",
    "InvocationResult",
    "ProvisionResult",
]

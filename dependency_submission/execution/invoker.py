"""Build-tool invocation.

Builds the command line for the classified workspace and runs it with the
workspace as working directory. The environment overlay (GITHUB_TOKEN, the
PR head GITHUB_SHA) is merged onto a copy of the inherited environment at
spawn time; os.environ itself is never modified.

Command shapes:
  sbt   sbt [--batch] "<task> <json>[; <second task>]"
  Mill  <mill> --import ivy:<coordinate>::<version> <task-path>/submit

The exit status is returned as-is. Submission is not idempotent, so nothing
here retries.
"""

import logging
import os
import subprocess
import time
from pathlib import Path
from typing import Mapping, Optional

from dependency_submission.detector.types import BuildTool, Workspace
from dependency_submission.errors import InvocationError, ToolNotFound, ToolProvisioningError
from dependency_submission.execution.mill import provision_mill
from dependency_submission.execution.probe import command_exists
from dependency_submission.execution.types import InvocationResult
from dependency_submission.options.types import SubmissionOptions
from dependency_submission.plugin.types import MILL_PLUGIN, SBT_PLUGIN_FAMILIES, resolve_version

logger = logging.getLogger(__name__)

SBT_COMMAND = "sbt"
MILL_COMMAND = "mill"


def build_sbt_command(options: SubmissionOptions) -> list[str]:
    """Return argv for the sbt task of the options' plugin generation."""
    family = SBT_PLUGIN_FAMILIES[options.generation]
    task = f"{family.task} {options.to_json()}"
    if family.second_task:
        task = f"{task}; {family.second_task}"

    argv = [SBT_COMMAND]
    if family.batch:
        argv.append("--batch")
    argv.append(task)
    return argv


def build_mill_command(launcher: str, plugin_version: Optional[str] = None) -> list[str]:
    """Return argv importing the Mill plugin and running its submit task."""
    version = resolve_version(plugin_version, MILL_PLUGIN.default_version)
    return [
        launcher,
        "--import",
        f"ivy:{MILL_PLUGIN.coordinate}::{version}",
        f"{MILL_PLUGIN.task_path}/submit",
    ]


def resolve_mill_launcher(base_dir: Path) -> str:
    """Return the Mill executable to run for base_dir.

    Falls back to a `mill` on PATH when the wrapper cannot be provisioned.

    Raises:
        ToolProvisioningError: no wrapper could be provisioned and no global
            mill is installed.
    """
    provision = provision_mill(base_dir)
    if provision.is_success:
        return str(provision.wrapper.resolve())

    if command_exists(MILL_COMMAND):
        logger.warning(
            "Mill wrapper unavailable (%s); falling back to %s on PATH",
            provision.error,
            MILL_COMMAND,
        )
        return MILL_COMMAND

    raise ToolProvisioningError(
        f"Could not provision Mill: {provision.error}, and no {MILL_COMMAND} "
        "command is installed"
    )


def run_build_tool(
    argv: list[str],
    cwd: Path,
    env_overlay: Optional[Mapping[str, str]] = None,
) -> InvocationResult:
    """Spawn the build tool and wait for it.

    Output is not captured so it streams straight into the job log.

    Raises:
        InvocationError: the process could not be spawned.
    """
    overlay = dict(env_overlay or {})
    env = {**os.environ, **overlay}
    logger.info(
        "Running %s (cwd=%s, env overrides=%s)",
        " ".join(argv),
        cwd,
        ",".join(sorted(overlay)) or "none",
    )

    start = time.monotonic()
    try:
        completed = subprocess.run(argv, cwd=str(cwd), env=env)
    except OSError as exc:
        raise InvocationError(f"Failed to start {argv[0]}: {exc}") from exc
    duration = time.monotonic() - start

    result = InvocationResult(
        command=argv,
        exit_code=completed.returncode,
        duration_seconds=duration,
        env_overrides=sorted(overlay),
    )
    status = "OK" if result.is_success else "FAILED"
    logger.info(
        "%s %s (exit=%d, %.1fs)",
        argv[0], status, result.exit_code, result.duration_seconds,
    )
    return result


def invoke(
    workspace: Workspace,
    options: SubmissionOptions,
    plugin_version_override: Optional[str] = None,
    env_overlay: Optional[Mapping[str, str]] = None,
) -> InvocationResult:
    """Run the submission task for the workspace's build tool.

    For sbt, the plugin version lives in the injected plugin file; the
    override only matters for Mill, where it is part of the --import.

    Raises:
        ToolNotFound: sbt is not installed.
        ToolProvisioningError: Mill could not be provisioned.
        InvocationError: the process could not be spawned.
    """
    if workspace.kind == BuildTool.SBT:
        if not command_exists(SBT_COMMAND):
            raise ToolNotFound(SBT_COMMAND)
        argv = build_sbt_command(options)
    else:
        launcher = resolve_mill_launcher(workspace.base_dir)
        argv = build_mill_command(launcher, plugin_version_override)

    return run_build_tool(argv, workspace.base_dir, env_overlay)

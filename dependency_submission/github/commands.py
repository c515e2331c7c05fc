"""GitHub Actions workflow commands.

The runner parses `::command::value` lines from stdout. Outputs are
appended to the file named by GITHUB_OUTPUT.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, value: str, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    out.write(f"::{command}::{escape_data(value)}\n")
    out.flush()


def set_secret(value: str, stream: Optional[TextIO] = None) -> None:
    """Mask value in every later line of the job log."""
    if value:
        issue_command("add-mask", value, stream)


def set_failed(message: str, stream: Optional[TextIO] = None) -> None:
    """Annotate the job with an error. The caller sets the exit code."""
    issue_command("error", message, stream)


def set_output(name: str, value: str, output_path: Optional[str]) -> None:
    """Append name=value to GITHUB_OUTPUT. No-op outside a runner."""
    if not output_path:
        return
    with Path(output_path).open("a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")

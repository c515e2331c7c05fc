"""Types for build-tool execution."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class ProvisionResult:
    """Outcome of resolving or downloading the Mill wrapper script.

    `wrapper` is the script to run when provisioning succeeded. `error`
    carries the download/permission failure otherwise, so the caller can
    tell it apart from a later invocation failure.
    """

    wrapper: Optional[Path] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.wrapper is not None and self.error is None


@dataclass
class InvocationResult:
    """Exit status of the delegated build tool. Success iff exit_code == 0."""

    command: list[str]
    exit_code: int
    duration_seconds: float
    env_overrides: list[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> dict:
        return {
            "command": self.command,
            "exit_code": self.exit_code,
            "duration_seconds": round(self.duration_seconds, 3),
            "env_overrides": self.env_overrides,
            "is_success": self.is_success,
        }

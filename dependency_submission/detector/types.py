"""Shared types for the workspace detector."""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class BuildTool(StrEnum):
    """Build tools whose workspaces we can provision."""

    SBT = "sbt"
    MILL = "mill"


# Files whose presence marks a workspace, checked relative to the base dir.
SBT_MARKERS: tuple[str, ...] = ("build.sbt", "project/build.properties")
MILL_MARKERS: tuple[str, ...] = ("build.mill", "build.mill.scala", "build.sc")

MARKERS: dict[BuildTool, tuple[str, ...]] = {
    BuildTool.SBT: SBT_MARKERS,
    BuildTool.MILL: MILL_MARKERS,
}

# Tie-break when both markers are present and no tool was chosen explicitly.
# First entry wins.
DEFAULT_PRECEDENCE: tuple[BuildTool, ...] = (BuildTool.MILL, BuildTool.SBT)


@dataclass
class Workspace:
    """A base directory recognised as the root of a supported build.

    Evidence lists the marker files that qualified the workspace, in the
    form "<tool>: <marker>", for log output.
    """

    base_dir: Path
    kind: BuildTool
    evidence: list[str] = field(default_factory=list)

    @property
    def project_dir(self) -> Path:
        return self.base_dir / "project"

    def to_dict(self) -> dict:
        return {
            "base_dir": str(self.base_dir),
            "kind": self.kind.value,
            "evidence": self.evidence,
        }

"""Types for the plugin module.

An sbt plugin generation bundles everything that differs between the
legacy dependency-graph plugin and the current dependency-submission
plugin: coordinates, pinned version, file prefix and task syntax.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional

from dependency_submission.errors import ConfigError


class PluginGeneration(StrEnum):
    """Which sbt plugin family the run targets."""

    SUBMISSION = "submission"
    GRAPH = "graph"


@dataclass(frozen=True)
class SbtPluginFamily:
    """Static description of one sbt plugin generation.

    `second_task` runs after the main task in the same sbt session when set
    (the submission plugin generates the snapshot, then submits it).
    """

    group: str
    artifact: str
    default_version: str
    file_prefix: str
    task: str
    second_task: Optional[str] = None
    batch: bool = False


SBT_PLUGIN_FAMILIES: dict[PluginGeneration, SbtPluginFamily] = {
    PluginGeneration.SUBMISSION: SbtPluginFamily(
        group="ch.epfl.scala",
        artifact="sbt-github-dependency-submission",
        default_version="3.1.0",
        file_prefix="github-dependency-submission",
        task="githubGenerateSnapshot",
        second_task="githubSubmitSnapshot",
        batch=True,
    ),
    PluginGeneration.GRAPH: SbtPluginFamily(
        group="ch.epfl.scala",
        artifact="sbt-github-dependency-graph",
        default_version="0.1.0-M5",
        file_prefix="github-dependency-graph",
        task="githubSubmitDependencyGraph",
    ),
}


@dataclass(frozen=True)
class MillPlugin:
    """Mill plugin coordinate, imported on the command line with --import."""

    coordinate: str
    default_version: str
    task_path: str


MILL_PLUGIN = MillPlugin(
    coordinate="io.chris-kipp::mill-github-dependency-graph",
    default_version="0.2.5",
    task_path="io.kipp.mill.github.dependency.graph.Graph",
)


def resolve_version(override: Optional[str], default: str) -> str:
    """Return the override when non-blank, else the pinned default."""
    version = (override or "").strip()
    return version or default


@dataclass(frozen=True)
class PluginDescriptor:
    """An sbt plugin coordinate plus its rendered declaration."""

    group: str
    artifact: str
    version: str

    def __post_init__(self) -> None:
        if not self.version.strip():
            raise ConfigError(
                f"Plugin version for {self.group}:{self.artifact} must not be empty"
            )

    @classmethod
    def for_generation(
        cls,
        generation: PluginGeneration,
        version_override: Optional[str] = None,
    ) -> "PluginDescriptor":
        family = SBT_PLUGIN_FAMILIES[generation]
        return cls(
            group=family.group,
            artifact=family.artifact,
            version=resolve_version(version_override, family.default_version),
        )

    @property
    def rendered_declaration(self) -> str:
        return f'addSbtPlugin("{self.group}" % "{self.artifact}" % "{self.version}")'


@dataclass
class TransientPluginFile:
    """A plugin declaration file written into `<base>/project` for one run.

    Never deleted by this package; the CI runner's workspace teardown owns
    its lifetime.
    """

    path: Path
    content: str

    def to_dict(self) -> dict:
        return {"path": str(self.path), "content": self.content}

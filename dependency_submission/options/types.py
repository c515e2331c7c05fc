"""Types for the submission options payload.

SubmissionOptions is the validated form of the free-text action inputs.
to_payload() renders the JSON object the sbt plugin task expects; each
plugin generation only understands a subset of the fields.
"""

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from dependency_submission.plugin.types import PluginGeneration


class ResolveFailurePolicy(StrEnum):
    """How the plugin treats a dependency resolution failure."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class DependencySpec:
    """A dependency to ignore; fields become optional from the right."""

    organization: str
    name: Optional[str] = None
    version: Optional[str] = None

    def to_dict(self) -> dict:
        payload = {"organization": self.organization}
        if self.name is not None:
            payload["name"] = self.name
        if self.version is not None:
            payload["version"] = self.version
        return payload


@dataclass
class SubmissionOptions:
    """Filters and policies handed to the build tool's submission task."""

    generation: PluginGeneration = PluginGeneration.SUBMISSION
    projects: list[str] = field(default_factory=list)
    scala_versions: list[str] = field(default_factory=list)
    ignored_modules: list[str] = field(default_factory=list)
    ignored_dependencies: list[DependencySpec] = field(default_factory=list)
    ignored_configs: list[str] = field(default_factory=list)
    on_resolve_failure: ResolveFailurePolicy = ResolveFailurePolicy.ERROR
    correlator: str = ""
    ref_override: Optional[str] = None

    def to_payload(self) -> dict:
        if self.generation == PluginGeneration.GRAPH:
            return {
                "projects": self.projects,
                "scalaVersions": self.scala_versions,
                "ignoredModules": self.ignored_modules,
            }

        payload = {
            "ignoredModules": self.ignored_modules,
            "ignoredDependencies": [d.to_dict() for d in self.ignored_dependencies],
            "ignoredConfigs": self.ignored_configs,
            "onResolveFailure": self.on_resolve_failure.value,
            "correlator": self.correlator,
        }
        if self.ref_override:
            payload["refOverride"] = self.ref_override
        return payload

    def to_json(self) -> str:
        """Compact JSON, embedded verbatim in the sbt command line."""
        return json.dumps(self.to_payload(), separators=(",", ":"))

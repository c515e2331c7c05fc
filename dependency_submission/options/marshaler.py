"""Option marshaler: raw action inputs -> SubmissionOptions.

Inputs arrive as strings where "" means "not provided". List inputs are
whitespace separated; dependencies-ignore tokens are colon-delimited
`organization[:name[:version]]` specs. Any malformed value fails the whole
run; nothing is silently dropped.

This module never touches the filesystem, the environment or processes.
"""

import logging
from enum import StrEnum
from typing import Mapping, TypeVar

from dependency_submission.errors import InvalidEnumValue, MalformedSpec
from dependency_submission.options.types import (
    DependencySpec,
    ResolveFailurePolicy,
    SubmissionOptions,
)
from dependency_submission.plugin.types import PluginGeneration

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)


def split_list(raw: str | None) -> list[str]:
    """Split on whitespace, dropping empty tokens. Order and duplicates kept."""
    return (raw or "").split()


def parse_dependency_spec(token: str) -> DependencySpec:
    """Parse one `org`, `org:name` or `org:name:version` token."""
    parts = token.split(":")
    if not 1 <= len(parts) <= 3 or any(not part for part in parts):
        raise MalformedSpec(token)
    return DependencySpec(*parts)


def parse_enum(input_name: str, raw: str | None, enum_cls: type[E], default: E) -> E:
    """Case-sensitive match against the enum's literal values."""
    if not raw:
        return default
    for member in enum_cls:
        if member.value == raw:
            return member
    raise InvalidEnumValue(input_name, raw, [m.value for m in enum_cls])


def marshal(raw: Mapping[str, str], default_correlator: str = "") -> SubmissionOptions:
    """Validate raw inputs and build the submission options.

    Keys are the action input names (`modules-ignore`, `on-resolve-failure`,
    ...). Missing keys are treated as empty.

    Raises:
        MalformedSpec: a dependencies-ignore token has the wrong shape.
        InvalidEnumValue: on-resolve-failure or plugin-generation is invalid.
    """
    generation = parse_enum(
        "plugin-generation",
        raw.get("plugin-generation"),
        PluginGeneration,
        PluginGeneration.SUBMISSION,
    )
    on_resolve_failure = parse_enum(
        "on-resolve-failure",
        raw.get("on-resolve-failure"),
        ResolveFailurePolicy,
        ResolveFailurePolicy.ERROR,
    )
    ignored_dependencies = [
        parse_dependency_spec(token)
        for token in split_list(raw.get("dependencies-ignore"))
    ]

    options = SubmissionOptions(
        generation=generation,
        projects=split_list(raw.get("projects")),
        scala_versions=split_list(raw.get("scala-versions")),
        ignored_modules=split_list(raw.get("modules-ignore")),
        ignored_dependencies=ignored_dependencies,
        ignored_configs=split_list(raw.get("configs-ignore")),
        on_resolve_failure=on_resolve_failure,
        correlator=raw.get("correlator") or default_correlator,
        ref_override=raw.get("ref-override") or None,
    )
    logger.debug("Submission options: %s", options.to_json())
    return options

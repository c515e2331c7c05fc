"""Workspace classifier: decides whether a base directory is sbt or Mill.

Detection flow:
1. Validate the explicit build-tool choice (before touching the filesystem).
2. Probe the marker files of every tool the choice allows.
3. If more than one tool qualifies, the precedence tuple picks the winner.

Markers:
  build.sbt / project/build.properties         → sbt
  build.mill / build.mill.scala / build.sc     → Mill
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from dependency_submission.detector.types import (
    DEFAULT_PRECEDENCE,
    MARKERS,
    BuildTool,
    Workspace,
)
from dependency_submission.errors import NoSupportedWorkspace, UnsupportedBuildTool

logger = logging.getLogger(__name__)


def parse_build_tool(choice: Optional[str]) -> Optional[BuildTool]:
    """Return the explicitly chosen tool, or None for automatic detection.

    Empty and whitespace-only values mean "not provided". Anything that is
    not a supported tool name (including "none") is a configuration error.
    """
    normalized = (choice or "").strip().lower()
    if not normalized:
        return None
    try:
        return BuildTool(normalized)
    except ValueError:
        raise UnsupportedBuildTool(choice.strip()) from None


def parse_precedence(raw: Optional[str]) -> tuple[BuildTool, ...]:
    """Parse a space-separated precedence list such as "sbt mill".

    Tools missing from the list keep their default relative order after the
    listed ones. An empty value yields DEFAULT_PRECEDENCE.
    """
    order: list[BuildTool] = []
    for token in (raw or "").split():
        tool = parse_build_tool(token)
        if tool not in order:
            order.append(tool)
    for tool in DEFAULT_PRECEDENCE:
        if tool not in order:
            order.append(tool)
    return tuple(order)


def find_markers(base_dir: Path, tool: BuildTool) -> list[str]:
    """Return the marker files of `tool` present under base_dir."""
    return [marker for marker in MARKERS[tool] if (base_dir / marker).exists()]


def classify(
    base_dir: Path,
    explicit_choice: Optional[str] = None,
    precedence: Sequence[BuildTool] = DEFAULT_PRECEDENCE,
) -> Workspace:
    """Classify base_dir as an sbt or Mill workspace.

    Pure with respect to the filesystem: only existence checks are made.

    Raises:
        UnsupportedBuildTool: explicit_choice is set to an unsupported value.
        NoSupportedWorkspace: no allowed tool has a marker in base_dir.
    """
    chosen = parse_build_tool(explicit_choice)
    base_dir = Path(base_dir)

    candidates = [tool for tool in precedence if chosen is None or tool == chosen]
    qualified: list[tuple[BuildTool, list[str]]] = []
    for tool in candidates:
        found = find_markers(base_dir, tool)
        if found:
            qualified.append((tool, found))

    if not qualified:
        checked = [marker for tool in candidates for marker in MARKERS[tool]]
        raise NoSupportedWorkspace(str(base_dir), checked)

    kind, found = qualified[0]
    if len(qualified) > 1:
        losers = ", ".join(tool.value for tool, _ in qualified[1:])
        logger.warning(
            "Both %s and %s markers found in %s; using %s by precedence %s",
            kind.value,
            losers,
            base_dir,
            kind.value,
            " > ".join(tool.value for tool in precedence),
        )

    workspace = Workspace(
        base_dir=base_dir,
        kind=kind,
        evidence=[f"{kind.value}: {marker}" for marker in found],
    )
    logger.info(
        "Workspace classified: base_dir=%s kind=%s explicit=%s",
        base_dir,
        kind.value,
        chosen.value if chosen else "auto",
    )
    return workspace

"""Detector module for classifying sbt / Mill workspaces.

Public API:
    classify(base_dir, explicit_choice, precedence) -> Workspace
"""

from dependency_submission.detector.types import DEFAULT_PRECEDENCE, BuildTool, Workspace
from dependency_submission.detector.workspace import (
    classify,
    parse_build_tool,
    parse_precedence,
)

__all__ = [
    "classify",
    "parse_build_tool",
    "parse_precedence",
    "BuildTool",
    "Workspace",
    "DEFAULT_PRECEDENCE",
]

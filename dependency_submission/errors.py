"""Error taxonomy for a submission run.

Every failure a run can hit is a SubmissionError subclass. The orchestrator
records the stage that raised it and reports a single message through the
workflow `::error::` command. Nothing in this package retries.
"""

from typing import Optional


class SubmissionError(Exception):
    """Base class for every expected failure of a run.

    `stage` is filled in by the orchestrator when the error crosses a stage
    boundary, so messages can name where the run stopped.
    """

    stage: Optional[str] = None


class ConfigError(SubmissionError):
    """Invalid action configuration (missing token, bad build-tool choice)."""


class UnsupportedBuildTool(ConfigError):
    """The explicit build-tool input names a tool we do not support."""

    def __init__(self, choice: str):
        self.choice = choice
        super().__init__(
            f"Unsupported build tool '{choice}': expected 'sbt', 'mill' or empty"
        )


class InvalidWorkspace(SubmissionError):
    """The base directory lacks the layout the build tool expects."""


class NoSupportedWorkspace(InvalidWorkspace):
    """Neither sbt nor Mill markers were found in the base directory."""

    def __init__(self, base_dir: str, checked: list[str]):
        self.base_dir = base_dir
        self.checked = checked
        super().__init__(
            f"{base_dir} is not a supported workspace: none of "
            f"{', '.join(checked)} found"
        )


class ValidationError(SubmissionError):
    """An input value could not be marshaled into submission options."""


class MalformedSpec(ValidationError):
    """A dependencies-ignore token is not `org[:name[:version]]`."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Malformed dependency spec '{token}': expected "
            "'organization', 'organization:name' or 'organization:name:version'"
        )


class InvalidEnumValue(ValidationError):
    """An enum-valued input is not one of its allowed literals."""

    def __init__(self, input_name: str, value: str, allowed: list[str]):
        self.input_name = input_name
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid value '{value}' for input '{input_name}': "
            f"expected one of {', '.join(repr(a) for a in allowed)}"
        )


class ToolNotFound(SubmissionError):
    """A required executable is not on the search path."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Not found {command} command")


class ToolProvisioningError(SubmissionError):
    """The Mill wrapper could not be downloaded and no mill is installed."""


class PluginWriteError(SubmissionError):
    """The transient plugin file could not be written."""


class InvocationError(SubmissionError):
    """The build tool could not be spawned or exited non-zero."""

    def __init__(self, message: str, exit_code: Optional[int] = None):
        self.exit_code = exit_code
        super().__init__(message)


class UnknownError(SubmissionError):
    """Wraps an exception outside the taxonomy."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"unknown error: {cause}")

"""Action inputs loaded from the environment.

GitHub exposes each action input as `INPUT_<NAME>`, upper-cased with
hyphens kept (`INPUT_BASE-DIR`). Composite actions usually forward them
with underscores instead, so both spellings are accepted. Matching is
case-insensitive. Every input is a string and "" means "not provided".
"""

from typing import Any, Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dependency_submission.errors import ConfigError


def _input(name: str, default: Optional[str] = "") -> Any:
    """Field bound to INPUT_<NAME> (hyphen or underscore spelling)."""
    upper = name.upper()
    aliases = AliasChoices(
        f"INPUT_{upper}",
        f"INPUT_{upper.replace('-', '_')}",
    )
    if default is None:
        return Field(validation_alias=aliases)
    return Field(default=default, validation_alias=aliases)


# Raw inputs handed to the option marshaler, keyed by action input name.
OPTION_INPUTS: tuple[str, ...] = (
    "projects",
    "scala-versions",
    "modules-ignore",
    "dependencies-ignore",
    "configs-ignore",
    "on-resolve-failure",
    "plugin-generation",
    "correlator",
    "ref-override",
)


class ActionInputs(BaseSettings):
    """The action's inputs.

    `base-dir` falls back to `working-directory`, then ".".
    `sbt-plugin-version` and `mill-plugin-version` fall back to
    `plugin-version`.
    """

    # Env lookup by field name is prefixed too: only INPUT_* variables count.
    model_config = SettingsConfigDict(
        case_sensitive=False,
        populate_by_name=True,
        env_prefix="INPUT_",
        extra="ignore",
    )

    token: str = _input("token", default=None)

    base_dir: str = _input("base-dir")
    working_directory: str = _input("working-directory")

    build_tool: str = _input("build-tool")
    build_tool_precedence: str = _input("build-tool-precedence")

    plugin_generation: str = _input("plugin-generation")
    sbt_plugin_version: str = _input("sbt-plugin-version")
    plugin_version: str = _input("plugin-version")
    mill_plugin_version: str = _input("mill-plugin-version")

    projects: str = _input("projects")
    scala_versions: str = _input("scala-versions")
    modules_ignore: str = _input("modules-ignore")
    dependencies_ignore: str = _input("dependencies-ignore")
    configs_ignore: str = _input("configs-ignore")
    on_resolve_failure: str = _input("on-resolve-failure")
    correlator: str = _input("correlator")
    ref_override: str = _input("ref-override")

    @field_validator("token")
    @classmethod
    def token_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("input 'token' is required and must not be empty")
        return v

    @property
    def effective_base_dir(self) -> str:
        return self.base_dir.strip() or self.working_directory.strip() or "."

    @property
    def effective_sbt_plugin_version(self) -> str:
        return self.sbt_plugin_version.strip() or self.plugin_version.strip()

    @property
    def effective_mill_plugin_version(self) -> str:
        return self.mill_plugin_version.strip() or self.plugin_version.strip()

    def option_inputs(self) -> dict[str, str]:
        """Raw strings for the marshaler, keyed by input name."""
        return {name: getattr(self, name.replace("-", "_")) for name in OPTION_INPUTS}


def load_inputs() -> ActionInputs:
    """Read the action inputs from the environment.

    Raises:
        ConfigError: the token is missing or an input is malformed.
    """
    try:
        return ActionInputs()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'inputs'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigError(f"Invalid action inputs: {problems}") from exc

"""Tests for loading action inputs from INPUT_* variables."""

import pytest

from dependency_submission.core.config import ActionInputs, load_inputs
from dependency_submission.errors import ConfigError


class TestLoadInputs:
    def test_hyphenated_runner_names(self, monkeypatch):
        monkeypatch.setenv("INPUT_TOKEN", "t")
        monkeypatch.setenv("INPUT_BASE-DIR", "build")
        monkeypatch.setenv("INPUT_MODULES-IGNORE", "a b")

        inputs = load_inputs()

        assert inputs.token == "t"
        assert inputs.effective_base_dir == "build"
        assert inputs.modules_ignore == "a b"

    def test_underscored_names(self, monkeypatch):
        monkeypatch.setenv("INPUT_TOKEN", "t")
        monkeypatch.setenv("INPUT_ON_RESOLVE_FAILURE", "warning")
        monkeypatch.setenv("INPUT_SBT_PLUGIN_VERSION", "3.0.0")

        inputs = load_inputs()

        assert inputs.on_resolve_failure == "warning"
        assert inputs.effective_sbt_plugin_version == "3.0.0"

    def test_missing_token(self):
        with pytest.raises(ConfigError, match="(?i)token"):
            load_inputs()

    def test_blank_token(self, monkeypatch):
        monkeypatch.setenv("INPUT_TOKEN", "  ")
        with pytest.raises(ConfigError, match="(?i)token"):
            load_inputs()

    def test_unrelated_env_is_ignored(self, monkeypatch):
        monkeypatch.setenv("INPUT_TOKEN", "t")
        monkeypatch.setenv("TOKEN", "job-token")
        monkeypatch.setenv("BASE_DIR", "/elsewhere")
        monkeypatch.setenv("BUILD_TOOL", "gradle")
        monkeypatch.setenv("PROJECTS", "leaked")
        monkeypatch.setenv("CORRELATOR", "leakedcorr")

        inputs = load_inputs()

        assert inputs.token == "t"
        assert inputs.effective_base_dir == "."
        assert inputs.build_tool == ""
        assert inputs.projects == ""
        assert inputs.correlator == ""

    def test_bare_token_does_not_satisfy_required_input(self, monkeypatch):
        monkeypatch.setenv("TOKEN", "job-token")
        with pytest.raises(ConfigError, match="(?i)token"):
            load_inputs()


class TestFallbacks:
    def test_base_dir_defaults_to_cwd(self):
        assert ActionInputs(token="t").effective_base_dir == "."

    def test_working_directory_alias(self):
        inputs = ActionInputs(token="t", working_directory="app")
        assert inputs.effective_base_dir == "app"

    def test_base_dir_wins_over_working_directory(self):
        inputs = ActionInputs(token="t", base_dir="a", working_directory="b")
        assert inputs.effective_base_dir == "a"

    def test_plugin_version_alias(self):
        inputs = ActionInputs(token="t", plugin_version="9.9.9")
        assert inputs.effective_sbt_plugin_version == "9.9.9"
        assert inputs.effective_mill_plugin_version == "9.9.9"

    def test_tool_specific_versions_win(self):
        inputs = ActionInputs(
            token="t",
            plugin_version="9.9.9",
            sbt_plugin_version="3.0.0",
            mill_plugin_version="0.3.0",
        )
        assert inputs.effective_sbt_plugin_version == "3.0.0"
        assert inputs.effective_mill_plugin_version == "0.3.0"


def test_option_inputs_keys():
    inputs = ActionInputs(token="t", dependencies_ignore="org:name", correlator="c")
    raw = inputs.option_inputs()
    assert raw["dependencies-ignore"] == "org:name"
    assert raw["correlator"] == "c"
    assert raw["on-resolve-failure"] == ""
    assert "token" not in raw

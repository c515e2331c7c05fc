"""Tests for marshaling raw action inputs into SubmissionOptions."""

import json

import pytest

from dependency_submission.errors import InvalidEnumValue, MalformedSpec, ValidationError
from dependency_submission.options import (
    DependencySpec,
    ResolveFailurePolicy,
    SubmissionOptions,
    marshal,
    parse_dependency_spec,
    split_list,
)
from dependency_submission.plugin import PluginGeneration


class TestSplitList:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("", []),
            (None, []),
            ("a", ["a"]),
            ("a b c", ["a", "b", "c"]),
            ("  a   b  ", ["a", "b"]),
            ("a\nb", ["a", "b"]),
            ("b a b", ["b", "a", "b"]),
        ],
    )
    def test_split(self, raw, expected):
        assert split_list(raw) == expected


class TestParseDependencySpec:
    def test_organization_only(self):
        assert parse_dependency_spec("org") == DependencySpec("org")

    def test_organization_and_name(self):
        assert parse_dependency_spec("org:name") == DependencySpec("org", "name")

    def test_full_spec(self):
        assert parse_dependency_spec("org:name:1.0") == DependencySpec("org", "name", "1.0")

    @pytest.mark.parametrize("token", ["a:b:c:d", "org::1.0", ":name", "org:"])
    def test_malformed(self, token):
        with pytest.raises(MalformedSpec) as exc_info:
            parse_dependency_spec(token)
        assert token in str(exc_info.value)


class TestMarshal:
    def test_empty_inputs_use_defaults(self):
        options = marshal({}, default_correlator="wf_job_action")

        assert options.generation == PluginGeneration.SUBMISSION
        assert options.ignored_modules == []
        assert options.ignored_dependencies == []
        assert options.ignored_configs == []
        assert options.on_resolve_failure == ResolveFailurePolicy.ERROR
        assert options.correlator == "wf_job_action"
        assert options.ref_override is None

    def test_dependency_specs(self):
        options = marshal({"dependencies-ignore": "org:name:1.0 org2"})

        assert [d.to_dict() for d in options.ignored_dependencies] == [
            {"organization": "org", "name": "name", "version": "1.0"},
            {"organization": "org2"},
        ]

    def test_four_part_spec_fails_whole_run(self):
        with pytest.raises(MalformedSpec, match="a:b:c:d"):
            marshal({"dependencies-ignore": "good:dep a:b:c:d"})

    def test_lists_keep_order_and_duplicates(self):
        options = marshal(
            {
                "modules-ignore": "core_2.13  docs_2.13 core_2.13",
                "configs-ignore": "test  it",
                "projects": "core",
                "scala-versions": "2.13.12 3.3.1",
            }
        )
        assert options.ignored_modules == ["core_2.13", "docs_2.13", "core_2.13"]
        assert options.ignored_configs == ["test", "it"]
        assert options.projects == ["core"]
        assert options.scala_versions == ["2.13.12", "3.3.1"]

    @pytest.mark.parametrize("value", ["error", "warning"])
    def test_resolve_failure_policy(self, value):
        assert marshal({"on-resolve-failure": value}).on_resolve_failure.value == value

    @pytest.mark.parametrize("value", ["Error", "WARNING", "warn", "fail", " error"])
    def test_resolve_failure_policy_is_case_sensitive(self, value):
        with pytest.raises(InvalidEnumValue) as exc_info:
            marshal({"on-resolve-failure": value})
        assert exc_info.value.input_name == "on-resolve-failure"
        assert exc_info.value.allowed == ["error", "warning"]

    def test_invalid_generation(self):
        with pytest.raises(ValidationError, match="plugin-generation"):
            marshal({"plugin-generation": "legacy"})

    def test_explicit_correlator_wins(self):
        options = marshal({"correlator": "mine"}, default_correlator="wf_job_action")
        assert options.correlator == "mine"

    def test_ref_override_passes_through(self):
        assert marshal({"ref-override": "refs/heads/main"}).ref_override == "refs/heads/main"


class TestPayload:
    def test_submission_payload_fields(self):
        options = marshal(
            {
                "modules-ignore": "a_2.13",
                "dependencies-ignore": "org:name",
                "configs-ignore": "test",
                "on-resolve-failure": "warning",
                "correlator": "c",
            }
        )
        assert options.to_payload() == {
            "ignoredModules": ["a_2.13"],
            "ignoredDependencies": [{"organization": "org", "name": "name"}],
            "ignoredConfigs": ["test"],
            "onResolveFailure": "warning",
            "correlator": "c",
        }

    def test_ref_override_included_when_set(self):
        options = SubmissionOptions(ref_override="refs/heads/release")
        assert options.to_payload()["refOverride"] == "refs/heads/release"

    def test_graph_payload_only_has_graph_fields(self):
        options = marshal(
            {
                "plugin-generation": "graph",
                "projects": "core",
                "scala-versions": "3.3.1",
                "on-resolve-failure": "warning",
            }
        )
        assert options.to_payload() == {
            "projects": ["core"],
            "scalaVersions": ["3.3.1"],
            "ignoredModules": [],
        }

    def test_json_is_compact(self):
        options = SubmissionOptions(correlator="c")
        rendered = options.to_json()
        assert " " not in rendered
        assert json.loads(rendered) == options.to_payload()

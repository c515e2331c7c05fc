"""Tests for workflow command output."""

import io

from dependency_submission.github.commands import escape_data, set_failed, set_output, set_secret


def test_escape_data():
    assert escape_data("100% done\r\nnext") == "100%25 done%0D%0Anext"


def test_set_secret_masks_value():
    stream = io.StringIO()
    set_secret("ghs_token", stream)
    assert stream.getvalue() == "::add-mask::ghs_token\n"


def test_set_secret_skips_empty_value():
    stream = io.StringIO()
    set_secret("", stream)
    assert stream.getvalue() == ""


def test_set_failed_writes_error_annotation():
    stream = io.StringIO()
    set_failed("plugin injection failed:\nmissing folder", stream)
    assert stream.getvalue() == "::error::plugin injection failed:%0Amissing folder\n"


def test_set_failed_defaults_to_stdout(capsys):
    set_failed("boom")
    assert capsys.readouterr().out == "::error::boom\n"


def test_set_output_appends(tmp_path):
    output = tmp_path / "github_output"
    output.write_text("existing=1\n", encoding="utf-8")

    set_output("build-tool", "sbt", str(output))

    assert output.read_text(encoding="utf-8") == "existing=1\nbuild-tool=sbt\n"


def test_set_output_without_runner_is_noop(tmp_path):
    set_output("build-tool", "sbt", "")
    assert list(tmp_path.iterdir()) == []

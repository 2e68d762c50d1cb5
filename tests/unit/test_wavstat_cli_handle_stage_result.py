"""Unit tests for wavstat.cli._handle_stage_result."""

import json

import pytest
import yaml

from wavstat.api.config.cmd_version import cmd_version
from wavstat.cli._handle_stage_result import _handle_stage_result


def test_rejects_unknown_display_format():
    with pytest.raises(ValueError, match="xml"):
        _handle_stage_result(cmd_version, display_format="xml")


def test_json_format_writes_output_dict(capsys):
    with pytest.raises(SystemExit) as exc_info:
        _handle_stage_result(cmd_version, display_format="json")()

    assert exc_info.value.code == 0
    data = json.loads(capsys.readouterr().out)
    assert set(data) == {"errors", "warnings", "version"}


def test_text_without_printer_falls_back_to_yaml(capsys):
    with pytest.raises(SystemExit):
        _handle_stage_result(cmd_version)()

    assert "version" in yaml.safe_load(capsys.readouterr().out)


def test_text_printer_receives_output(capsys):
    seen = []

    with pytest.raises(SystemExit):
        _handle_stage_result(cmd_version, text_printer=lambda display, output: seen.append(output))()

    assert seen and "version" in seen[0]
    assert capsys.readouterr().out == ""

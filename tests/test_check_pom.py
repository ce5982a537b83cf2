"""Tests for the standalone check_pom.py script."""

from __future__ import annotations

import json
import sys
from unittest.mock import patch

import check_pom
import pytest

from maven_version_checker.exceptions import RegistryError
from maven_version_checker.testing import FakeRegistry


def _run(argv: list[str], registry: FakeRegistry):
    with (
        patch.object(sys, "argv", ["check_pom.py", *argv]),
        patch("check_pom.MavenCentralClient") as client_cls,
    ):
        client_cls.return_value.__aenter__.return_value = registry
        check_pom.main()
    return client_cls


class TestCheckPom:
    def test_table_output(self, single_module_pom, capsys):
        _run([str(single_module_pom)], FakeRegistry(default="999.9.9"))
        out = capsys.readouterr().out
        assert "org.mongodb:bson" in out
        assert "7 update(s) available." in out

    def test_directory_target(self, single_module_pom, capsys):
        client_cls = _run([str(single_module_pom.parent)], FakeRegistry())
        assert "0 update(s) available." in capsys.readouterr().out
        client_cls.assert_called_once_with(check_pom.DEFAULT_BASE_URL)

    def test_multi_module_sections(self, multi_module_pom, capsys):
        _run([str(multi_module_pom)], FakeRegistry(default="999.9.9"))
        out = capsys.readouterr().out
        assert "### parent-pom ###" in out
        assert "### foobar-b ###" in out
        assert "### foobar-empty ###" not in out

    def test_json_output(self, single_module_pom, capsys):
        _run([str(single_module_pom), "--json"], FakeRegistry(versions={"org.mongodb:bson": "5.0.0"}))
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"dependencies": ["org.mongodb:bson:5.0.0"]}
        assert "artifact.checked" in captured.err
        assert "walker.module_started" not in captured.err

    def test_verbose_logs_debug_to_stderr(self, single_module_pom, capsys):
        _run([str(single_module_pom), "--json", "-v"], FakeRegistry())
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {}
        assert "walker.module_started" in captured.err

    def test_registry_url_option(self, single_module_pom, capsys):
        client_cls = _run(
            [str(single_module_pom), "--registry-url", "https://mirror.example"], FakeRegistry()
        )
        client_cls.assert_called_once_with("https://mirror.example")

    def test_missing_target(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run([str(tmp_path / "absent.xml")], FakeRegistry())
        assert excinfo.value.code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_checker_error(self, single_module_pom, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run([str(single_module_pom)], FakeRegistry(error=RegistryError("offline")))
        assert excinfo.value.code == 1
        assert "Error: offline" in capsys.readouterr().err

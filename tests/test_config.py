from __future__ import annotations

import dataclasses
import os
import sys
import tempfile

import pytest

from kicad_bootstrap.config import AppConfig, debug_enabled, default_log_file


def test_defaults_match_kicad_ppa_install():
    config = AppConfig()

    assert config.packages == ("kicad",)
    assert config.ppa == "ppa:kicad/kicad-9.0-releases"
    assert config.max_retries == 3
    assert config.retry_delay == 5.0
    assert config.probe_timeout == 5.0


def test_log_file_is_derived_from_script_name():
    assert default_log_file("kicad-bootstrap") == os.path.join(
        tempfile.gettempdir(), "kicad-bootstrap.log"
    )


@pytest.mark.parametrize(
    "env,expected",
    [
        ({}, False),
        ({"DEBUG": "0"}, False),
        ({"DEBUG": ""}, False),
        ({"DEBUG": "false"}, False),
        ({"DEBUG": "true"}, False),
        ({"DEBUG": "2"}, False),
        ({"DEBUG": "1"}, True),
    ],
)
def test_debug_flag_from_env(env, expected):
    config = AppConfig.from_env(env, script_name="kicad-bootstrap")

    assert config.debug is expected
    assert config.log_file.endswith("kicad-bootstrap.log")


def test_debug_enabled_handles_none():
    assert debug_enabled(None) is False


def test_config_is_immutable():
    config = AppConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_retries = 10


def test_module_invocation_uses_tool_name_for_log(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/usr/lib/python3/site-packages/kicad_bootstrap/__main__.py"])

    assert default_log_file() == os.path.join(tempfile.gettempdir(), "kicad-bootstrap.log")


def test_script_invocation_uses_script_name_for_log(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/kicad-bootstrap"])

    assert default_log_file() == os.path.join(tempfile.gettempdir(), "kicad-bootstrap.log")

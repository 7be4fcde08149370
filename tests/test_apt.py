from __future__ import annotations

import subprocess

from kicad_bootstrap import apt
from kicad_bootstrap.apt import PackageManager, run_command


class RecordingRunner:
    def __init__(self, result: bool = True):
        self.result = result
        self.commands: list[list[str]] = []

    def __call__(self, cmd):
        self.commands.append(cmd)
        return self.result


def test_commands_go_through_sudo():
    runner = RecordingRunner()
    pm = PackageManager(runner=runner)

    pm.add_repository("ppa:kicad/kicad-9.0-releases")
    pm.update()
    pm.install("kicad")

    assert runner.commands == [
        ["sudo", "add-apt-repository", "-y", "ppa:kicad/kicad-9.0-releases"],
        ["sudo", "apt", "update"],
        ["sudo", "apt", "install", "-y", "kicad"],
    ]


def test_failure_status_is_reported():
    pm = PackageManager(runner=RecordingRunner(result=False), sudo=False)

    assert pm.install("kicad") is False
    assert pm.update() is False


def test_is_available_uses_which():
    assert PackageManager(which=lambda name: "/usr/bin/apt").is_available() is True
    assert PackageManager(which=lambda name: None).is_available() is False


def test_has_repository_scans_list_and_directory(tmp_path):
    sources_list = tmp_path / "sources.list"
    sources_list.write_text("deb http://archive.ubuntu.com/ubuntu noble main\n")
    sources_dir = tmp_path / "sources.list.d"
    sources_dir.mkdir()
    (sources_dir / "other.list").write_text("deb http://example.com stable main\n")
    pm = PackageManager()

    assert pm.has_repository("kicad/kicad-9.0-releases", [str(sources_list), str(sources_dir)]) is False

    (sources_dir / "kicad-ubuntu-kicad-9_0-releases-noble.sources").write_text(
        "URIs: https://ppa.launchpadcontent.net/kicad/kicad-9.0-releases/ubuntu/\n"
    )
    assert pm.has_repository("kicad/kicad-9.0-releases", [str(sources_list), str(sources_dir)]) is True


def test_has_repository_ignores_missing_files(tmp_path):
    pm = PackageManager()

    assert pm.has_repository("kicad", [str(tmp_path / "missing.list")]) is False


def test_run_command_maps_exit_status(monkeypatch):
    seen = []

    def fake_run(cmd, check):
        seen.append((cmd, check))
        return subprocess.CompletedProcess(cmd, 0 if cmd[-1] == "ok" else 100)

    monkeypatch.setattr(apt.subprocess, "run", fake_run)

    assert run_command(["echo", "ok"]) is True
    assert run_command(["echo", "bad"]) is False
    assert seen[0] == (["echo", "ok"], False)


def test_run_command_missing_binary_is_a_failure(monkeypatch):
    def fake_run(cmd, check):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(apt.subprocess, "run", fake_run)

    assert run_command(["no-such-tool"]) is False

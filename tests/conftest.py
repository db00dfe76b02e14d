"""Pytest configuration and shared fixtures."""

import json
import sys

import pytest
from click.testing import CliRunner

from sitepipe.cli import cli
from sitepipe.config import grunt_variant
from tests.helpers import (
    FAIL_SCRIPT,
    GENERATE_SCRIPT,
    PUBLISH_SCRIPT,
    RecordingTask,
    with_commands,
)


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's $SITEPIPE_CONFIG out of the tests."""
    monkeypatch.delenv("SITEPIPE_CONFIG", raising=False)


@pytest.fixture
def journal():
    return []


@pytest.fixture
def recording_registry(journal):
    """Registry whose tasks only record that they ran."""
    return {
        name: RecordingTask(name, journal)
        for name in ("cleanup", "generation", "deploy")
    }


@pytest.fixture
def workdir(tmp_path):
    """Working directory with a small book under ./src."""
    root = tmp_path / "book"
    src = root / "src"
    src.mkdir(parents=True)
    (src / "README.md").write_text("# Scala Tour\n")
    (src / "SUMMARY.md").write_text("* [Intro](README.md)\n")
    return root


@pytest.fixture
def published(tmp_path):
    """Directory the fake publisher copies the site into."""
    return tmp_path / "published"


@pytest.fixture
def generate_command():
    return [sys.executable, "-c", GENERATE_SCRIPT, "${params.input}", "${params.dest}"]


@pytest.fixture
def publish_command(published):
    return [sys.executable, "-c", PUBLISH_SCRIPT, "${params.base}", str(published)]


@pytest.fixture
def fail_command():
    return [sys.executable, "-c", FAIL_SCRIPT]


@pytest.fixture
def grunt_config(workdir, generate_command, publish_command):
    """The ``grunt`` variant with fake generator and publisher."""
    return with_commands(grunt_variant(workdir), generate_command, publish_command)


@pytest.fixture
def write_config(workdir):
    """Write a sitepipe.json (into the working directory by default)."""

    def _write(data, path=None):
        target = path or workdir / "sitepipe.json"
        target.write_text(json.dumps(data, indent=2))
        return target

    return _write


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["--workdir", str(path), "list"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke

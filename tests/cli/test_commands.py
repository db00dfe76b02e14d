"""Tests for the sitepipe CLI."""

import pytest

from sitepipe import __version__


@pytest.fixture
def fake_config(write_config, generate_command, publish_command):
    """sitepipe.json mirroring the grunt variant with fake collaborators."""
    return write_config(
        {
            "name": "scala-tour",
            "generation": {
                "input": "./src",
                "dest": ".grunt/gitbook/site",
                "title": "Scala Tour",
                "description": "My location for adding scala findings",
                "github": "dcapwell/scala-tour",
                "command": generate_command,
            },
            "deploy": {"base": ".grunt/gitbook/site", "command": publish_command},
            "cleanup": {"paths": ".grunt"},
        }
    )


def test_help(invoke):
    result = invoke(["--help"])
    assert result.exit_code == 0
    for command in ("default", "publish", "run", "list", "check"):
        assert command in result.output


def test_version(invoke):
    result = invoke(["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_builtin_variant(invoke, workdir):
    result = invoke(["--workdir", str(workdir), "list"])
    assert result.exit_code == 0
    assert "Configuration: grunt" in result.output
    assert "publish: cleanup → generation → deploy" in result.output
    assert "default: generation" in result.output


def test_publish(invoke, workdir, fake_config, published):
    result = invoke(["--workdir", str(workdir), "publish"])
    assert result.exit_code == 0, result.output
    assert "Pipeline publish completed: cleanup, generation, deploy" in result.output
    assert (published / "index.html").exists()


def test_default(invoke, workdir, fake_config, published):
    result = invoke(["--workdir", str(workdir), "default"])
    assert result.exit_code == 0, result.output
    assert "Pipeline default completed: generation" in result.output
    assert (workdir / ".grunt" / "gitbook" / "site" / "index.html").exists()
    assert not published.exists()


def test_run_dry_run(invoke, workdir, fake_config, published):
    result = invoke(["--workdir", str(workdir), "run", "publish", "--dry-run"])
    assert result.exit_code == 0
    assert "[1/3] cleanup" in result.output
    assert "[3/3] deploy" in result.output
    assert not (workdir / ".grunt").exists()
    assert not published.exists()


def test_run_unknown_pipeline(invoke, workdir):
    result = invoke(["--workdir", str(workdir), "run", "deploy"])
    assert result.exit_code == 1
    assert "unknown task: deploy" in result.output


def test_step_failure_exits_nonzero(invoke, workdir, fake_config, published):
    # No generated site yet and no src: generation fails, deploy never runs.
    (workdir / "src" / "README.md").unlink()
    (workdir / "src" / "SUMMARY.md").unlink()
    (workdir / "src").rmdir()

    result = invoke(["--workdir", str(workdir), "publish"])

    assert result.exit_code == 1
    assert "generation failed: source directory not found" in result.output
    assert not published.exists()


def test_explicit_config_option(invoke, workdir, fake_config, tmp_path):
    moved = tmp_path / "elsewhere.json"
    moved.write_text(fake_config.read_text())
    fake_config.unlink()

    result = invoke(["--config", str(moved), "--workdir", str(workdir), "list"])
    assert result.exit_code == 0
    assert "Configuration: scala-tour" in result.output


def test_invalid_config_file(invoke, workdir, write_config):
    write_config({"name": "broken"})
    result = invoke(["--workdir", str(workdir), "publish"])
    assert result.exit_code == 1
    assert "Invalid config" in result.output


def test_check_grunt_ok(invoke, workdir):
    result = invoke(["--workdir", str(workdir), "check"])
    assert result.exit_code == 0
    assert "deploy.base: .grunt/gitbook/site" in result.output
    assert "ok" in result.output


def test_check_book_warns(invoke, workdir):
    result = invoke(["--workdir", str(workdir), "--variant", "book", "check"])
    assert result.exit_code == 0
    assert "warning: stale-output" in result.output


def test_check_against_other_variant(invoke, workdir):
    result = invoke(
        ["--workdir", str(workdir), "--variant", "book", "check", "--against", "grunt"]
    )
    assert result.exit_code == 0
    assert "differs from grunt: deploy.base: _book != .grunt/gitbook/site" in result.output


def test_check_mismatch_fails(invoke, workdir, write_config):
    write_config(
        {
            "name": "mismatch",
            "generation": {"dest": "out", "title": "T", "github": "o/r"},
            "deploy": {"base": "_book"},
            "cleanup": {"paths": ["out"]},
        }
    )
    result = invoke(["--workdir", str(workdir), "check"])
    assert result.exit_code == 1
    assert "deploy-base-mismatch" in result.output


def test_check_relative_workdir(invoke, workdir, monkeypatch):
    monkeypatch.chdir(workdir.parent)
    result = invoke(["--workdir", "book", "check"])
    assert result.exit_code == 0, result.output
    assert "generation.dest: .grunt/gitbook/site" in result.output
    assert "deploy.base: .grunt/gitbook/site" in result.output
    assert "ok" in result.output


def test_publish_relative_workdir(invoke, workdir, fake_config, published, monkeypatch):
    monkeypatch.chdir(workdir.parent)
    result = invoke(["--workdir", "book", "publish"])
    assert result.exit_code == 0, result.output
    assert (workdir / ".grunt" / "gitbook" / "site" / "index.html").exists()
    assert not (workdir / "book").exists()
    assert (published / "index.html").exists()

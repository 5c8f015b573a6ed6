import logging

from typer.testing import CliRunner

from javaenv.main import app

runner = CliRunner()


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "javaenv 0.1.0" in result.output


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "Locate Java executables" in result.output


def test_debug_flag(workspace):
    """--debug flag should be accepted and not error."""
    result = runner.invoke(app, ["--debug", "javac-args", "a/b/File.java", "-w", str(workspace)])
    assert result.exit_code == 0


def test_debug_flag_lowers_javaenv_logger(workspace):
    runner.invoke(app, ["--debug", "javac-args", "a/b/File.java", "-w", str(workspace)])
    assert logging.getLogger("javaenv").level == logging.DEBUG

    runner.invoke(app, ["javac-args", "a/b/File.java", "-w", str(workspace)])
    assert logging.getLogger("javaenv").level == logging.WARNING


def test_debug_logs_searched_variables(workspace, monkeypatch, caplog):
    monkeypatch.setenv("JAVA_HOME", "/opt/jdk-test")

    with caplog.at_level(logging.DEBUG, logger="javaenv"):
        runner.invoke(app, ["--debug", "javac-args", "a/b/File.java", "-w", str(workspace)])

    assert "JAVA_HOME=/opt/jdk-test" in caplog.text

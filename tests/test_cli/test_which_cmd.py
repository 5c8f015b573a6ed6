"""Tests for the which command."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from javaenv.main import app

runner = CliRunner()


def _jdk(root: Path, name: str = "java") -> Path:
    binary = root / "bin" / name
    binary.parent.mkdir(parents=True)
    binary.write_text("")
    return binary


class TestWhich:
    def test_prints_java_home_binary(self, tmp_path: Path, monkeypatch):
        binary = _jdk(tmp_path / "jdk")
        monkeypatch.setenv("JAVA_HOME", str(tmp_path / "jdk"))

        result = runner.invoke(app, ["which", "java"])

        assert result.exit_code == 0
        assert str(binary) in result.output

    def test_defaults_to_java(self, tmp_path: Path, monkeypatch):
        binary = _jdk(tmp_path / "jdk")
        monkeypatch.setenv("JAVA_HOME", str(tmp_path / "jdk"))

        result = runner.invoke(app, ["which"])

        assert result.exit_code == 0
        assert str(binary) in result.output

    def test_not_found_exits_with_error(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JAVA_HOME", str(tmp_path / "nothing"))
        monkeypatch.setenv("PATH", str(tmp_path / "empty"))

        result = runner.invoke(app, ["which", "javac"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unmatched_name_with_directory_exits_with_error(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JAVA_HOME", str(tmp_path / "nothing"))
        monkeypatch.setenv("PATH", str(tmp_path / "empty"))

        result = runner.invoke(app, ["which", "tools/javac"])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestEnvFile:
    def test_missing_env_file(self, tmp_path: Path):
        result = runner.invoke(app, ["which", "--env-file", str(tmp_path / "missing.env")])

        assert result.exit_code == 1
        assert "Env file not found" in result.output

    def test_env_file_supplies_java_home(self, tmp_path: Path, monkeypatch):
        binary = _jdk(tmp_path / "jdk")
        env_file = tmp_path / ".env"
        env_file.write_text(f"JAVA_HOME={tmp_path / 'jdk'}\n")
        # setenv first so monkeypatch restores "unset" after load_dotenv writes it.
        monkeypatch.setenv("JAVA_HOME", "placeholder")
        monkeypatch.delenv("JAVA_HOME")

        result = runner.invoke(app, ["which", "java", "--env-file", str(env_file)])

        assert result.exit_code == 0
        assert str(binary) in result.output

    def test_existing_variables_win_over_env_file(self, tmp_path: Path, monkeypatch):
        binary = _jdk(tmp_path / "jdk17")
        _jdk(tmp_path / "jdk8")
        env_file = tmp_path / ".env"
        env_file.write_text(f"JAVA_HOME={tmp_path / 'jdk8'}\n")
        monkeypatch.setenv("JAVA_HOME", str(tmp_path / "jdk17"))

        result = runner.invoke(app, ["which", "java", "--env-file", str(env_file)])

        assert result.exit_code == 0
        assert str(binary) in result.output

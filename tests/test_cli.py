"""
Tests for the CLI module.

These tests drive the click commands end to end against a temporary
configuration file, with the git author identity patched out.
"""

import os
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from gitflow_pairing import __version__
from gitflow_pairing.cli import cli

ALICE_IDENT = "Alice A <a@x.com> 1700000000 +0100"


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "pairing.yaml"


@pytest.fixture
def repo(tmp_path, monkeypatch):
    repo_path = tmp_path / "project"
    (repo_path / ".git" / "hooks").mkdir(parents=True)
    monkeypatch.chdir(repo_path)
    return repo_path


def _invoke(config_path, *args):
    return CliRunner().invoke(cli, ["--config", str(config_path), *args])


def _seed(config_path, repo_path):
    config_path.write_text(
        yaml.safe_dump(
            {
                "devs": {
                    "alice": {"name": "Alice A", "email": "a@x.com"},
                    "bob": {"name": "Bob B", "email": "b@x.com"},
                },
                "repos": {os.getcwd(): {"devs": ["alice", "bob"]}},
            },
            sort_keys=False,
        )
    )


class TestCLI:
    """Test cases for the main CLI group."""

    def test_cli_help(self):
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "GitFlow Pairing" in result.output
        for command in ("add-dev", "add-repo", "update-repo-devs", "init-repo", "add-info"):
            assert command in result.output

    def test_version_display(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestConfigCommands:
    """Commands that edit the configuration store."""

    def test_add_dev_creates_config(self, config_path):
        result = _invoke(config_path, "add-dev", "alice", "Alice A", "a@x.com")

        assert result.exit_code == 0
        assert "Added dev alice" in result.output
        data = yaml.safe_load(config_path.read_text())
        assert data["devs"] == {"alice": {"name": "Alice A", "email": "a@x.com"}}

    def test_add_repo(self, config_path, tmp_path):
        _invoke(config_path, "add-dev", "alice", "Alice A", "a@x.com")

        result = _invoke(
            config_path, "add-repo", str(tmp_path), "--devs", "alice", "--issue-id", "PROJ-1"
        )

        assert result.exit_code == 0
        data = yaml.safe_load(config_path.read_text())
        assert data["repos"][str(tmp_path.resolve())] == {"devs": ["alice"], "issueId": "PROJ-1"}

    def test_add_repo_unknown_developer(self, config_path, tmp_path):
        result = _invoke(config_path, "add-repo", str(tmp_path), "--devs", "ghost")

        assert result.exit_code == 1
        assert "no dev with id 'ghost' found" in result.output
        assert not config_path.exists()

    def test_update_repo_devs(self, config_path, repo):
        _seed(config_path, repo)

        result = _invoke(config_path, "update-repo-devs", "bob")

        assert result.exit_code == 0
        data = yaml.safe_load(config_path.read_text())
        assert data["repos"][os.getcwd()]["devs"] == ["bob"]

    def test_update_repo_devs_unknown_repo(self, config_path, repo):
        result = _invoke(config_path, "update-repo-devs", "bob")

        assert result.exit_code == 1
        assert "no repo with path" in result.output

    def test_list_devs(self, config_path, repo):
        _seed(config_path, repo)

        result = _invoke(config_path, "list-devs")

        assert result.exit_code == 0
        assert "alice" in result.output
        assert "b@x.com" in result.output

    def test_list_devs_empty(self, config_path):
        result = _invoke(config_path, "list-devs")

        assert result.exit_code == 0
        assert "No developers found" in result.output

    def test_show(self, config_path, repo):
        _seed(config_path, repo)

        result = _invoke(config_path, "show")

        assert result.exit_code == 0
        assert yaml.safe_load(result.output)["devs"]["bob"]["email"] == "b@x.com"

    def test_invalid_config_reports_error(self, config_path):
        config_path.write_text("devs: [unclosed\n")

        result = _invoke(config_path, "show")

        assert result.exit_code == 1
        assert "Invalid YAML" in result.output


class TestInitRepo:
    """Test cases for the init-repo command."""

    def test_installs_hooks(self, config_path, repo):
        result = _invoke(config_path, "init-repo", "--executable", "/opt/bin/gitflow-pairing")

        assert result.exit_code == 0
        hook = repo / ".git" / "hooks" / "commit-msg"
        assert hook.read_text() == "#!/bin/sh\n/opt/bin/gitflow-pairing add-info $1\n"

    def test_refuses_existing_hooks(self, config_path, repo):
        (repo / ".git" / "hooks" / "prepare-commit-msg").write_text("#!/bin/sh\n")

        result = _invoke(config_path, "init-repo", str(repo), "--executable", "gfp")

        assert result.exit_code == 1
        assert "already defined" in result.output

    def test_overwrite(self, config_path, repo):
        (repo / ".git" / "hooks" / "prepare-commit-msg").write_text("#!/bin/sh\n")

        result = _invoke(config_path, "init-repo", "--overwrite", "--executable", "gfp")

        assert result.exit_code == 0
        assert "gfp add-info" in (repo / ".git" / "hooks" / "prepare-commit-msg").read_text()


class TestAddInfo:
    """Test cases for the add-info hook entry point."""

    @patch("gitflow_pairing.core.rewriter.get_author_ident", return_value=ALICE_IDENT)
    def test_rewrites_message(self, mock_ident, config_path, repo):
        _seed(config_path, repo)
        message_file = repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("[42] Fix bug\n")

        result = _invoke(config_path, "add-info", str(message_file))

        assert result.exit_code == 0, result.output
        assert message_file.read_text() == (
            "Fix bug\n\nIssue-id: #42\n\nCo-authored-by: Bob B <b@x.com>\n"
        )

    @patch("gitflow_pairing.core.rewriter.get_author_ident", return_value=ALICE_IDENT)
    def test_unknown_developer_leaves_message(self, mock_ident, config_path, repo):
        _seed(config_path, repo)
        message_file = repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("[bob,carol] Fix bug\n")

        result = _invoke(config_path, "add-info", str(message_file))

        assert result.exit_code == 1
        assert "carol" in result.output
        assert message_file.read_text() == "[bob,carol] Fix bug\n"

    @patch("gitflow_pairing.core.rewriter.get_author_ident", return_value=ALICE_IDENT)
    def test_latin1_message(self, mock_ident, config_path, repo):
        _seed(config_path, repo)
        message_file = repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_bytes(b"Caf\xe9 fix\n")

        result = _invoke(config_path, "add-info", str(message_file))

        assert result.exit_code == 0, result.output
        assert message_file.read_bytes() == b"Caf\xe9 fix\n\nCo-authored-by: Bob B <b@x.com>\n"

    def test_unconfigured_repository(self, config_path, repo):
        message_file = repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("Fix bug\n")

        result = _invoke(config_path, "add-info", str(message_file))

        assert result.exit_code == 1
        assert "no repo with path" in result.output
        assert message_file.read_text() == "Fix bug\n"

    @patch("gitflow_pairing.core.rewriter.get_author_ident", return_value=ALICE_IDENT)
    def test_debug_mode_prints_traceback(self, mock_ident, config_path, repo, monkeypatch):
        monkeypatch.setenv("GITFLOW_PAIRING_DEBUG", "1")
        _seed(config_path, repo)
        message_file = repo / ".git" / "COMMIT_EDITMSG"
        message_file.write_text("[nobody] Fix bug\n")

        result = _invoke(config_path, "add-info", str(message_file))

        assert result.exit_code == 1
        assert "Traceback" in result.output

"""Tests for the git author identity source."""

from unittest.mock import patch

import git
import pytest

from gitflow_pairing.core.git_identity import get_author_ident, get_git_var
from gitflow_pairing.errors import GitIdentityError


class TestGitIdentity:
    """Test cases for git var lookups."""

    @patch("gitflow_pairing.core.git_identity.git.Git")
    def test_get_author_ident(self, mock_git):
        mock_git.return_value.var.return_value = "Alice A <a@x.com> 1700000000 +0100"

        assert get_author_ident("/repo") == "Alice A <a@x.com> 1700000000 +0100"
        mock_git.assert_called_once_with("/repo")
        mock_git.return_value.var.assert_called_once_with("GIT_AUTHOR_IDENT")

    @patch("gitflow_pairing.core.git_identity.git.Git")
    def test_git_failure_is_wrapped(self, mock_git):
        error = git.GitCommandError(["git", "var", "GIT_AUTHOR_IDENT"], 128)
        mock_git.return_value.var.side_effect = error

        with pytest.raises(GitIdentityError) as exc_info:
            get_git_var("GIT_AUTHOR_IDENT")

        assert exc_info.value.__cause__ is error
        mock_git.assert_called_once_with(None)

    def test_reads_identity_from_real_repository(self, tmp_path, monkeypatch):
        for name in ("GIT_AUTHOR_NAME", "GIT_AUTHOR_EMAIL", "EMAIL"):
            monkeypatch.delenv(name, raising=False)
        repo = git.Repo.init(tmp_path)
        with repo.config_writer() as writer:
            writer.set_value("user", "name", "Test User")
            writer.set_value("user", "email", "test@example.com")

        ident = get_author_ident(tmp_path)

        assert ident.startswith("Test User <test@example.com>")

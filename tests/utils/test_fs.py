"""Tests for atomic file writes."""

import os
import stat

import pytest

from gitflow_pairing.utils.fs import atomic_write


class TestAtomicWrite:
    """Tests for atomic_write function."""

    def test_creates_file(self, tmp_path):
        target = tmp_path / "out.txt"
        atomic_write(target, "hello\n")
        assert target.read_text() == "hello\n"

    def test_keeps_permissions(self, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("old")
        os.chmod(target, 0o640)

        atomic_write(target, "new")

        assert stat.S_IMODE(target.stat().st_mode) == 0o640
        assert target.read_text() == "new"

    def test_preserves_crlf(self, tmp_path):
        target = tmp_path / "out.txt"
        atomic_write(target, "a\r\nb\r\n")
        assert target.read_bytes() == b"a\r\nb\r\n"

    def test_surrogateescape_restores_original_bytes(self, tmp_path):
        target = tmp_path / "out.txt"
        text = b"Caf\xe9\n".decode("utf-8", errors="surrogateescape")
        atomic_write(target, text, errors="surrogateescape")
        assert target.read_bytes() == b"Caf\xe9\n"

    def test_encoding_failure_keeps_target(self, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("old")
        text = b"Caf\xe9\n".decode("utf-8", errors="surrogateescape")

        with pytest.raises(UnicodeEncodeError):
            atomic_write(target, text)

        assert target.read_text() == "old"
        assert os.listdir(tmp_path) == ["out.txt"]

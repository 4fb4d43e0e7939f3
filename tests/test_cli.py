"""
Tests for CLI
=============
Tests for the d20 command-line interface in d20/cli.py.
"""

import base64
import re
import subprocess
import sys
from io import BytesIO
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from d20 import cli, entropy


def run_main(*argv):
    stream = BytesIO()
    status = cli.main(list(argv), stream=stream)
    return status, stream.getvalue()


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "d20", "--version"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "d20" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help lists the charsets."""
        result = subprocess.run(
            [sys.executable, "-m", "d20", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "--keyblock" in result.stdout
        assert "hexadecimal" in result.stdout

    def test_module_run(self):
        """Test python -m d20 writes tokens to stdout."""
        result = subprocess.run(
            [sys.executable, "-m", "d20", "--chars", "numeric", "--length", "4",
             "--count", "3", "--separator", ","],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
            timeout=60,
        )
        assert result.returncode == 0
        assert re.fullmatch(r"(\d{4},){3}", result.stdout)

    def test_list_charsets(self):
        result = subprocess.run(
            [sys.executable, "-m", "d20", "--list-charsets"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        for name in ("alphanumeric", "hexadecimal", "bytes"):
            assert name in result.stdout


class TestCLIGenerate:
    """Tests for token generation through main()."""

    def test_defaults(self):
        status, out = run_main()
        lines = out.decode().split("\n")
        assert status == 0
        assert len(lines) == 21
        assert all(len(line) == 20 for line in lines[:-1])

    def test_pin(self):
        status, out = run_main("--pin", "6", "--count", "2")
        assert status == 0
        assert re.fullmatch(r"\d{6}\n\d{6}\n", out.decode())

    def test_keyblock(self):
        status, out = run_main("--keyblock", "--length", "741", "--count", "1")
        assert status == 0
        block = out.decode()[:-1]
        lines = block.split("\n")
        assert all(len(line) == 65 for line in lines[:-1])
        assert len(base64.b64decode("".join(lines))) == 741

    def test_custom(self):
        status, out = run_main("--custom", "AB", "--length", "5", "--count", "1")
        assert status == 0
        assert re.fullmatch(r"[AB]{5}\n", out.decode())

    def test_tab_separator(self):
        status, out = run_main("--chars", "bin", "--length", "3", "--count", "2",
                               "--separator", "\\t")
        assert status == 0
        assert re.fullmatch(r"[01]{3}\t[01]{3}\t", out.decode())

    def test_mangle_lower(self):
        status, out = run_main("--chars", "hex", "--mangle", "lc", "--count", "3")
        assert status == 0
        assert re.fullmatch(r"([0-9a-f]{20}\n){3}", out.decode())

    def test_unique(self):
        status, out = run_main("--chars", "bin", "--length", "3", "--count", "8", "--unique")
        assert status == 0
        lines = out.decode().split("\n")[:-1]
        assert sorted(lines) == ["000", "001", "010", "011", "100", "101", "110", "111"]

    def test_mangle_base64_warns(self, caplog):
        with caplog.at_level("WARNING"):
            status, _ = run_main("--base64", "--mangle", "UC", "--count", "1")
        assert status == 0
        assert "cardinality" in caplog.text or "distinct" in caplog.text


class TestCLIErrors:
    """Tests for CLI error handling."""

    def test_bad_separator(self, capsys):
        """Test a malformed separator exits before any output."""
        status, out = run_main("--separator", "\\q")
        assert status == 2
        assert out == b""
        assert "separator error" in capsys.readouterr().err

    def test_custom_too_large(self, capsys):
        status, out = run_main("--custom", "x" * 300)
        assert status == 2
        assert out == b""
        assert "custom alphabet" in capsys.readouterr().err

    def test_entropy_failure(self, monkeypatch, capsys):
        """Test entropy failure is fatal with a non-zero status."""
        def broken(n):
            raise OSError("entropy unavailable")

        monkeypatch.setattr(entropy.os, "urandom", broken)
        status, out = run_main("--count", "3")
        assert status == 1
        assert out == b""
        assert "entropy unavailable" in capsys.readouterr().err

    def test_invalid_length(self):
        """Test non-integer lengths are rejected by argparse."""
        with pytest.raises(SystemExit) as exc:
            cli.main(["--length", "many"], stream=BytesIO())
        assert exc.value.code == 2

    def test_broken_pipe(self):
        class ClosedPipe(BytesIO):
            def write(self, data):
                raise BrokenPipeError()

        assert cli.main(["--count", "2"], stream=ClosedPipe()) == 0

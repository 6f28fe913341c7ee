"""Tests for the command-line interface."""

import json
import logging

import pytest

from prime_scroll.cli import main
from prime_scroll.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logging.getLogger("prime_scroll").handlers.clear()


class TestChunkCommand:
    """Tests for the chunk subcommand."""

    def test_first_chunk(self, capsys):
        """Test printing the first ten primes."""
        assert main(["chunk", "--count", "10"]) == 0
        out = capsys.readouterr().out
        assert " 2   3   5   7" in out
        assert "next cursor: 29" in out

    def test_resume(self, capsys):
        assert main(["chunk", "--cursor", "29", "--count", "5", "--columns", "5"]) == 0
        out = capsys.readouterr().out
        assert "31  37  41  43  47" in out
        assert "next cursor: 47" in out

    def test_negative_cursor(self, capsys):
        """Test invalid input exits with code 2."""
        assert main(["chunk", "--cursor", "-1"]) == 2
        assert "cursor must be >= 0" in capsys.readouterr().out


    def test_invalid_columns(self, capsys):
        """Test a zero column count exits with code 2."""
        assert main(["chunk", "--count", "3", "--columns", "0"]) == 2
        assert "columns must be >= 1" in capsys.readouterr().out


class TestScrollCommand:
    """Tests for the scroll subcommand."""

    def test_pages(self, capsys):
        """Test loading several pages."""
        assert main(["scroll", "--pages", "3"]) == 0
        out = capsys.readouterr().out
        assert "Primes from 2 (300 loaded):" in out
        assert "1987" in out

    def test_start_param(self, capsys):
        assert main(["scroll", "-n", "1000000007"]) == 0
        assert "1000000007" in capsys.readouterr().out

    def test_invalid_start(self, capsys):
        assert main(["scroll", "-n", "abc"]) == 2

    def test_overlong_start(self, capsys):
        assert main(["scroll", "-n", "9" * 5000]) == 2

    def test_invalid_columns(self, capsys):
        assert main(["scroll", "--columns", "-1"]) == 2

    def test_invalid_pages(self, capsys):
        assert main(["scroll", "--pages", "0"]) == 2

    def test_lucky(self, capsys):
        assert main(["scroll", "--lucky"]) == 0
        assert "(100 loaded)" in capsys.readouterr().out

    def test_config_file(self, tmp_path, capsys):
        """Test chunk size and start come from the config file."""
        path = tmp_path / "scroll.json"
        path.write_text(json.dumps({"chunk_size": 4, "start": 90}))
        assert main(["--config", str(path), "scroll"]) == 0
        out = capsys.readouterr().out
        assert "Primes from 90 (4 loaded):" in out
        assert "97  101  103  107" in out

    def test_bad_config_file(self, tmp_path, capsys):
        path = tmp_path / "scroll.json"
        path.write_text(json.dumps({"chunk_size": 0}))
        assert main(["--config", str(path), "scroll"]) == 2


class TestCheckCommand:
    """Tests for the check subcommand."""

    def test_check(self, capsys):
        assert main(["check", "97", "100", "-3"]) == 0
        out = capsys.readouterr().out
        assert "97: prime" in out
        assert "100: not prime" in out
        assert "-3: not prime" in out

    def test_check_beyond_int64(self, capsys):
        """Test numbers too large for int64."""
        assert main(["check", str(10**30 + 1), str(2**64 + 1), "97"]) == 0
        out = capsys.readouterr().out
        assert f"{10**30 + 1}: not prime" in out
        assert f"{2**64 + 1}: not prime" in out
        assert "97: prime" in out


class TestMain:
    """Tests for top-level behavior."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_log_file(self, tmp_path, capsys):
        """Test debug messages reach the log file."""
        log_path = tmp_path / "logs" / "scroll.log"
        assert main(["--log-file", str(log_path), "scroll", "--pages", "2"]) == 0
        text = log_path.read_text()
        assert "DEBUG" in text
        assert "Extended to 200 primes" in text


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_handlers_not_duplicated(self):
        setup_logger()
        logger = setup_logger()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        logger = setup_logger(log_path=tmp_path / "x.log")
        assert len(logger.handlers) == 2

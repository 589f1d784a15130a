"""Tests for the command line interface."""

import logging

import pytest
from click.testing import CliRunner

from genobox.cli import main
from genobox.utils.logging_utils import setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers the CLI attaches to the package logger."""
    yield
    logger = logging.getLogger("genobox")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestCLICommands:
    """Test CLI command availability."""

    def test_help(self):
        """Test --help lists the commands."""
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "datasets" in result.output
        assert "demo" in result.output

    def test_datasets(self):
        """Test datasets lists every bundled table with its size."""
        result = CliRunner().invoke(main, ["datasets"])
        assert result.exit_code == 0
        lines = dict(line.split("\t") for line in result.output.splitlines() if "\t" in line)
        assert set(lines) == {"bed", "bedpe", "gwas", "hic", "signal"}
        assert int(lines["bedpe"]) > 0

    @pytest.mark.slow
    def test_demo(self, tmp_path):
        """Test demo renders the example page."""
        output = tmp_path / "demo.png"
        result = CliRunner().invoke(main, ["demo", "-o", str(output), "--dpi", "50"])
        assert result.exit_code == 0, result.output
        assert output.exists()
        assert "Saved" in result.output

    def test_demo_params_file(self, tmp_path):
        """Test a parameter file overrides the demo region."""
        params = tmp_path / "region.yaml"
        params.write_text("chromstart: 28500000\nchromend: 29500000\n")
        output = tmp_path / "demo.pdf"
        result = CliRunner().invoke(main, ["demo", "-o", str(output), "-p", str(params)])
        assert result.exit_code == 0, result.output
        assert output.exists()


class TestLogging:
    """Test logger configuration."""

    def test_setup_logger_file(self, tmp_path):
        """Test records reach the log file."""
        log_file = tmp_path / "logs" / "genobox.log"
        logger = setup_logger("genobox.test", log_file=str(log_file))
        logger.info("page created")
        for handler in logger.handlers:
            handler.flush()
        assert "page created" in log_file.read_text()
        logger.handlers.clear()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Tests for configuration and logging setup.
"""

import io
import logging

import pytest

from bioseq.config import BioseqConfig, get_config, set_config, setup_logging
from bioseq.seq import DNASequence


class TestBioseqConfig:
    """Tests for BioseqConfig."""

    def test_defaults(self):
        config = BioseqConfig()
        assert config.fasta_line_width == 60
        assert config.log_level == "WARNING"
        assert config.zero_tolerance == 1e-12

    def test_validation(self):
        with pytest.raises(ValueError):
            BioseqConfig(fasta_line_width=0)
        with pytest.raises(ValueError):
            BioseqConfig(zero_tolerance=-1.0)
        with pytest.raises(ValueError):
            BioseqConfig(log_level="LOUD")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BIOSEQ_FASTA_LINE_WIDTH", "80")
        monkeypatch.setenv("BIOSEQ_LOG_LEVEL", "debug")
        monkeypatch.setenv("BIOSEQ_ZERO_TOLERANCE", "1e-9")
        config = BioseqConfig.from_env()
        assert config.fasta_line_width == 80
        assert config.log_level == "debug"
        assert config.zero_tolerance == 1e-9

    def test_get_set_config(self):
        custom = BioseqConfig(fasta_line_width=10)
        set_config(custom)
        try:
            assert get_config() is custom
        finally:
            set_config(None)
        assert get_config().fasta_line_width == 60


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_debug_records_reach_stream(self):
        stream = io.StringIO()
        handler = setup_logging(BioseqConfig(log_level="DEBUG"), stream=stream)
        try:
            DNASequence("ACGT", id="seq1").mutate(0, "G")
            assert "Mutating seq1 at 0" in stream.getvalue()
        finally:
            package_logger = logging.getLogger("bioseq")
            package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)

    def test_handler_not_duplicated(self):
        first = setup_logging(BioseqConfig(), stream=io.StringIO())
        second = setup_logging(BioseqConfig(), stream=io.StringIO())
        package_logger = logging.getLogger("bioseq")
        try:
            assert first not in package_logger.handlers
            assert second in package_logger.handlers
        finally:
            package_logger.removeHandler(second)
            package_logger.setLevel(logging.NOTSET)

"""
Configuration management for bioseq.

This module provides the package settings and a helper to route the
package's log records to a stream.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class BioseqConfig:
    """Package-wide settings."""
    fasta_line_width: int = 60
    log_level: str = "WARNING"
    zero_tolerance: float = 1e-12  # polynomial coefficients below this are zero

    def __post_init__(self) -> None:
        if self.fasta_line_width <= 0:
            raise ValueError("fasta_line_width must be positive")
        if self.zero_tolerance < 0:
            raise ValueError("zero_tolerance must not be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "BioseqConfig":
        """Create configuration from environment variables."""
        config = cls()
        if "BIOSEQ_FASTA_LINE_WIDTH" in os.environ:
            config.fasta_line_width = int(os.environ["BIOSEQ_FASTA_LINE_WIDTH"])
        if "BIOSEQ_LOG_LEVEL" in os.environ:
            config.log_level = os.environ["BIOSEQ_LOG_LEVEL"]
        if "BIOSEQ_ZERO_TOLERANCE" in os.environ:
            config.zero_tolerance = float(os.environ["BIOSEQ_ZERO_TOLERANCE"])
        config.__post_init__()
        return config


_config: Optional[BioseqConfig] = None


def get_config() -> BioseqConfig:
    """Get the active configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = BioseqConfig.from_env()
    return _config


def set_config(config: Optional[BioseqConfig]) -> None:
    """Replace the active configuration; ``None`` reloads from the environment on next use."""
    global _config
    _config = config


def setup_logging(config: Optional[BioseqConfig] = None, stream: TextIO = sys.stderr) -> logging.Handler:
    """
    Attach a stream handler to the ``bioseq`` logger.

    Args:
        config: Settings supplying the log level (defaults to the active configuration)
        stream: Destination for log output

    Returns:
        The installed handler
    """
    config = config or get_config()
    package_logger = logging.getLogger("bioseq")
    package_logger.setLevel(config.log_level.upper())

    for handler in list(package_logger.handlers):
        if getattr(handler, "_bioseq_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._bioseq_handler = True
    package_logger.addHandler(handler)
    return handler

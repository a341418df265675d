"""Configuration management for the sequential pattern package.

The package itself only reads ``max_fraction_digits`` and
``show_sequence_ids``. ``verbose`` and ``log_level`` are for applications
embedding it, which call ``config.setup_logging()`` to get the library's
DEBUG messages (sequence-ID overwrites, clones) on the root logger.
"""
import os
from dataclasses import dataclass
import logging


@dataclass
class SequentialMiningConfig:
    """Configuration shared by pattern rendering and support formatting.

    Attributes:
        verbose: Enable verbose output
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        max_fraction_digits: Maximum fraction digits of a formatted relative support
        show_sequence_ids: Append sequence IDs when rendering patterns
    """

    verbose: bool = False
    log_level: str = "WARNING"
    max_fraction_digits: int = 5
    show_sequence_ids: bool = False

    def __post_init__(self):
        """Initialize configuration from environment variables."""
        # Override with environment variables if set
        if os.getenv('SEQ_MINING_VERBOSE'):
            self.verbose = os.getenv('SEQ_MINING_VERBOSE', '').lower() == 'true'

        if os.getenv('SEQ_MINING_LOG_LEVEL'):
            self.log_level = os.getenv('SEQ_MINING_LOG_LEVEL', 'WARNING')

        if os.getenv('SEQ_MINING_MAX_FRACTION_DIGITS'):
            self.max_fraction_digits = int(os.getenv('SEQ_MINING_MAX_FRACTION_DIGITS', '5'))

        if os.getenv('SEQ_MINING_SHOW_SEQUENCE_IDS'):
            self.show_sequence_ids = os.getenv('SEQ_MINING_SHOW_SEQUENCE_IDS', '').lower() == 'true'

        if self.verbose and self.log_level.upper() == 'WARNING':
            self.log_level = 'INFO'

    def setup_logging(self):
        """Configure logging based on settings."""
        log_level = getattr(logging, self.log_level.upper(), logging.WARNING)
        logging.basicConfig(
            level=log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


# Global configuration instance
config = SequentialMiningConfig()

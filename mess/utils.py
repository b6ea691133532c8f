"""
Utility Functions Module

Provides:
- Logging configuration
- Seed management for reproducible random sources
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

from .config import Config
from .generators import RandomSource

logger = logging.getLogger(__name__)


class LoggerConfig:
    """
    Logging configuration manager

    Sets up consistent logging across the application
    """

    LOG_FORMAT = (
        '%(asctime)s - %(name)s - %(levelname)s - '
        '%(filename)s:%(lineno)d - %(message)s'
    )

    @staticmethod
    def setup_logger(
        name: str = "mess",
        level: int = logging.INFO,
        log_file: Optional[Union[str, Path]] = None
    ) -> logging.Logger:
        """
        Setup and configure logger

        Args:
            name: Logger name
            level: Logging level
            log_file: Optional file path for file logging

        Returns:
            Configured logger
        """
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Remove existing handlers
        logger.handlers.clear()

        formatter = logging.Formatter(LoggerConfig.LOG_FORMAT)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger


class SeedManager:
    """
    Manages seeds for reproducibility

    Every source it hands out derives from the one configured seed, so a
    run with the same seed produces the same values.
    """

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US"):
        """
        Initialize seed manager

        Args:
            seed: Random seed (None for random)
            locale: Faker locale for text primitives
        """
        self.seed = seed
        self.locale = locale

    @classmethod
    def from_config(cls, config: Config) -> "SeedManager":
        return cls(seed=config.generation.seed, locale=config.generation.locale)

    def source(self) -> RandomSource:
        """Random source for single-threaded use"""
        if self.seed is not None:
            logger.info(f"Random seed set to: {self.seed}")
        else:
            logger.info("No seed set - using random initialization")
        return RandomSource(seed=self.seed, locale=self.locale)

    def worker_sources(self, num_workers: int) -> List[RandomSource]:
        """One independent random source per worker"""
        if num_workers <= 0:
            raise ValueError("num_workers must be positive")
        return RandomSource(seed=self.seed, locale=self.locale).spawn(num_workers)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
):
    """
    Quick logging setup

    Args:
        level: Logging level (number or name)
        log_file: Optional log file path
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    LoggerConfig.setup_logger(level=level, log_file=log_file)

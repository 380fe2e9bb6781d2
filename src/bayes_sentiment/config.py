"""Runtime settings read from the environment and an optional ``.env`` file.

Recognized variables:

- ``BAYES_TRAINING_SET``: training corpus path (default ``assets/trainingSet.txt``)
- ``BAYES_TEST_SET``: testing corpus path (default ``assets/testSet.txt``)
- ``BAYES_LOG_LEVEL``: logging level name (default ``WARNING``)
- ``BAYES_SKIP_MALFORMED``: drop unlabeled lines instead of failing (default off)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_TRAINING_SET = Path("assets") / "trainingSet.txt"
DEFAULT_TEST_SET = Path("assets") / "testSet.txt"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Paths and switches used by the command-line interface."""

    training_set: Path = DEFAULT_TRAINING_SET
    test_set: Path = DEFAULT_TEST_SET
    log_level: str = DEFAULT_LOG_LEVEL
    skip_malformed: bool = False

    @classmethod
    def from_env(cls, dotenv_path: Optional[str | Path] = None) -> "Settings":
        """Build settings from environment variables.

        Values from ``dotenv_path`` (or a ``.env`` found from the working
        directory) fill in variables that are not already set.

        Raises:
            ValueError: If ``BAYES_LOG_LEVEL`` is not a known level name.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

        log_level = os.getenv("BAYES_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid BAYES_LOG_LEVEL {log_level!r}. Supported: {', '.join(LOG_LEVELS)}"
            )

        return cls(
            training_set=Path(os.getenv("BAYES_TRAINING_SET", str(DEFAULT_TRAINING_SET))),
            test_set=Path(os.getenv("BAYES_TEST_SET", str(DEFAULT_TEST_SET))),
            log_level=log_level,
            skip_malformed=os.getenv("BAYES_SKIP_MALFORMED", "").strip().lower() in _TRUTHY,
        )

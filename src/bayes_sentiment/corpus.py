"""Loading labeled corpora from text files.

A corpus file holds one example per line: raw text followed by a
whitespace-separated 0/1 label. Blank lines are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import MalformedLabelError
from .models import LabeledExample
from .tokenizer import parse_labeled_line

logger = logging.getLogger(__name__)


def read_lines(path: str | Path) -> list[tuple[int, str]]:
    """Read the non-blank lines of a corpus file.

    Args:
        path: Path to a UTF-8 text file.

    Returns:
        List of (line_number, line) tuples, line numbers starting at 1.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Corpus file not found: {path}")

    text = path.read_text(encoding="utf-8", errors="replace")
    # Only \n (or \r\n) ends a line; form feeds and other separators stay inline
    return [
        (number, line.rstrip("\r"))
        for number, line in enumerate(text.split("\n"), 1)
        if line.strip()
    ]


def load_examples(path: str | Path, skip_malformed: bool = False) -> list[LabeledExample]:
    """Parse a corpus file into labeled examples.

    Args:
        path: Path to the corpus file.
        skip_malformed: Log and drop lines without a valid 0/1 label
            instead of raising.

    Returns:
        Examples in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedLabelError: On the first bad line, unless ``skip_malformed``.
    """
    examples: list[LabeledExample] = []
    skipped = 0

    for number, line in read_lines(path):
        try:
            examples.append(parse_labeled_line(line, number))
        except MalformedLabelError as exc:
            if not skip_malformed:
                raise
            logger.warning("Skipping %s %s", Path(path).name, exc)
            skipped += 1

    logger.debug("Loaded %d examples from %s (%d skipped)", len(examples), path, skipped)
    return examples

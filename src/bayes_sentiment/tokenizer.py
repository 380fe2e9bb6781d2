"""Line tokenization for labeled and unlabeled text.

Text is lowercased and every character that is not an ASCII word
character or whitespace is deleted before splitting on whitespace, so
words joined by punctuation collapse into a single token
(``"don't"`` becomes ``"dont"``, ``"good,bad"`` becomes ``"goodbad"``).
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import MalformedLabelError
from .models import Label, LabeledExample

_STRIP_RE = re.compile(r"[^\w\s]", re.ASCII)


def tokenize(text: str) -> tuple[str, ...]:
    """Normalize raw text into a sequence of word tokens."""
    return tuple(_STRIP_RE.sub("", text.lower()).split())


def parse_labeled_line(line: str, line_number: Optional[int] = None) -> LabeledExample:
    """Tokenize a corpus line whose last token is its 0/1 label.

    Args:
        line: Raw text followed by a whitespace-separated integer label.
        line_number: Position of the line in its file, for error context.

    Returns:
        LabeledExample with the label token removed from ``tokens``.

    Raises:
        MalformedLabelError: If the line is empty or its trailing token is
            not 0 or 1.
    """
    tokens = tokenize(line)
    where = f"line {line_number}: " if line_number is not None else ""

    if not tokens:
        raise MalformedLabelError(
            f"{where}no label found in {line!r}",
            line_number=line_number,
        )

    *words, raw_label = tokens
    try:
        value = int(raw_label)
    except ValueError:
        raise MalformedLabelError(
            f"{where}trailing token {raw_label!r} is not an integer label",
            line_number=line_number,
            value=raw_label,
        ) from None

    if value not in (Label.NEGATIVE, Label.POSITIVE):
        raise MalformedLabelError(
            f"{where}label {value} is not 0 or 1",
            line_number=line_number,
            value=value,
        )

    return LabeledExample(tokens=tuple(words), label=Label(value), line_number=line_number)

"""Exceptions raised by the classifier core.

All of them derive from both ``ClassifierError`` and ``ValueError``.
"""

from __future__ import annotations

from typing import Optional


class ClassifierError(Exception):
    """Base class for classifier failures."""


class EmptyCorpusError(ClassifierError, ValueError):
    """Raised when training or evaluation is given zero examples."""


class MalformedLabelError(ClassifierError, ValueError):
    """A label or feature value is not 0/1.

    Attributes:
        line_number: 1-based line in the source corpus, when known.
        example_index: 0-based index of the example in its dataset, when known.
        position: Feature vector position holding the bad value, when known.
        value: The offending token or value.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        example_index: Optional[int] = None,
        position: Optional[int] = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.example_index = example_index
        self.position = position
        self.value = value

    def with_example_index(self, example_index: int) -> "MalformedLabelError":
        """Return a copy of this error annotated with a dataset index."""
        return MalformedLabelError(
            f"example {example_index}: {self.message}",
            line_number=self.line_number,
            example_index=example_index,
            position=self.position,
            value=self.value,
        )


class FeatureShapeError(ClassifierError, ValueError):
    """A feature vector does not match the vocabulary it is scored against.

    Attributes:
        example_index: 0-based index of the example in its dataset, when known.
    """

    def __init__(self, message: str, *, example_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.example_index = example_index

    def with_example_index(self, example_index: int) -> "FeatureShapeError":
        """Return a copy of this error annotated with a dataset index."""
        return FeatureShapeError(
            f"example {example_index}: {self.message}",
            example_index=example_index,
        )

"""Data models for the sentiment classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

FeatureVector = tuple[int, ...]


class Label(IntEnum):
    """Binary sentiment labels, plus a sentinel for unlabeled queries."""

    UNKNOWN = -1
    NEGATIVE = 0
    POSITIVE = 1

    @property
    def description(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class LabeledExample:
    """One tokenized line of a corpus and its label."""

    tokens: tuple[str, ...]
    label: Label
    line_number: int | None = None


@dataclass(frozen=True)
class Vocabulary:
    """Ordered, deduplicated set of words defining feature positions.

    The order of ``words`` is fixed at construction and determines the
    index of every feature in vectors built against this vocabulary.
    """

    words: tuple[str, ...] = ()
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.words)) != len(self.words):
            raise ValueError("vocabulary words must be unique")
        object.__setattr__(
            self, "_index", {word: idx for idx, word in enumerate(self.words)}
        )

    def index(self, word: str) -> int:
        """Feature position of ``word``.

        Raises:
            KeyError: If the word is not in the vocabulary.
        """
        return self._index[word]

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


@dataclass(frozen=True)
class TrainedModel:
    """Parameters of a trained Bernoulli Naive Bayes model.

    The four probability tuples are aligned with ``vocabulary.words``. Names
    read as <feature state>_<class>: ``pos_neg[i]`` is the log-probability
    that word *i* is present given a negative example.

    Attributes:
        vocabulary: Feature set the model was trained against.
        num_examples: Total training examples.
        num_pos: Positive training examples.
        num_neg: Negative training examples.
        pos_pos: log P(word present | positive).
        neg_pos: log P(word absent | positive).
        pos_neg: log P(word present | negative).
        neg_neg: log P(word absent | negative).
    """

    vocabulary: Vocabulary
    num_examples: int
    num_pos: int
    num_neg: int
    pos_pos: tuple[float, ...]
    neg_pos: tuple[float, ...]
    pos_neg: tuple[float, ...]
    neg_neg: tuple[float, ...]

    @property
    def vector_length(self) -> int:
        """Length of a feature vector for this model, label included."""
        return len(self.vocabulary) + 1

    def to_dict(self) -> dict:
        return {
            "num_examples": self.num_examples,
            "num_pos": self.num_pos,
            "num_neg": self.num_neg,
            "vocabulary_size": len(self.vocabulary),
            "vocabulary": list(self.vocabulary.words),
        }


@dataclass(frozen=True)
class TrainingResult:
    """Outcome of the train-and-score pipeline."""

    model: TrainedModel
    train_accuracy: float
    test_accuracy: float
    train_size: int = 0
    test_size: int = 0

    def to_dict(self) -> dict:
        return {
            "train_accuracy": round(self.train_accuracy, 2),
            "test_accuracy": round(self.test_accuracy, 2),
            "train_size": self.train_size,
            "test_size": self.test_size,
            "model": self.model.to_dict(),
        }

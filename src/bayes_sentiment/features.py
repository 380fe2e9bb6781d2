"""Vocabulary construction and binary bag-of-words featurization."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import FeatureVector, Label, LabeledExample, Vocabulary


def build_vocabulary(token_sequences: Iterable[Sequence[str]]) -> Vocabulary:
    """Collect distinct tokens in the order they are first seen.

    Args:
        token_sequences: Tokenized training examples.

    Returns:
        Vocabulary whose word order is stable for a given corpus order.
    """
    # dicts keep insertion order, so this is an ordered set
    seen: dict[str, None] = {}
    for tokens in token_sequences:
        for token in tokens:
            seen.setdefault(token, None)
    return Vocabulary(tuple(seen))


def featurize(tokens: Iterable[str], label: int, vocabulary: Vocabulary) -> FeatureVector:
    """Encode tokens as presence flags over ``vocabulary`` plus the label.

    Args:
        tokens: Word tokens of one example. Counts are ignored.
        label: Value stored in the final position, ``Label.UNKNOWN`` for
            queries.
        vocabulary: Feature set defining the vector layout.

    Returns:
        Tuple of length ``len(vocabulary) + 1``.
    """
    present = set(tokens)
    flags = [1 if word in present else 0 for word in vocabulary.words]
    flags.append(int(label))
    return tuple(flags)


def featurize_all(
    examples: Iterable[LabeledExample],
    vocabulary: Vocabulary,
) -> list[FeatureVector]:
    """Featurize a labeled dataset, keeping each example's label."""
    return [featurize(ex.tokens, ex.label, vocabulary) for ex in examples]


def featurize_query(tokens: Iterable[str], vocabulary: Vocabulary) -> FeatureVector:
    """Featurize unlabeled text for prediction."""
    return featurize(tokens, Label.UNKNOWN, vocabulary)

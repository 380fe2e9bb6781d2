"""Bernoulli Naive Bayes over binary bag-of-words features.

Provides the training and inference pipeline for a two-class sentiment
model using pure Python; no numpy or sklearn required.

Features:
- Presence/absence features over a first-seen-order vocabulary
- Add-one (Laplace) smoothed conditional log-probabilities
- Log-space decision rule with ties resolved to the negative class
- Accuracy scoring over featurized datasets
- Most informative words per class

A trained model is an immutable ``TrainedModel`` value; every query
function takes it as an explicit argument.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Optional

from .errors import EmptyCorpusError, FeatureShapeError, MalformedLabelError
from .features import build_vocabulary, featurize_all, featurize_query
from .models import (
    FeatureVector,
    Label,
    LabeledExample,
    TrainedModel,
    TrainingResult,
    Vocabulary,
)
from .tokenizer import parse_labeled_line, tokenize

logger = logging.getLogger(__name__)


def _is_binary(value: object) -> bool:
    """True only for the ints 0 and 1; bools and floats are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and value in (0, 1)


def _log_prior(count: int, total: int) -> float:
    """log(count / total), with an empty class scoring -inf."""
    return math.log(count / total) if count > 0 else -math.inf


def _check_length(
    vector: Sequence[int],
    expected: int,
    example_index: Optional[int] = None,
) -> None:
    if len(vector) != expected:
        where = f"example {example_index}: " if example_index is not None else ""
        raise FeatureShapeError(
            f"{where}feature vector has length {len(vector)}, expected {expected} "
            f"({expected - 1} vocabulary positions plus the label)",
            example_index=example_index,
        )


# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

def learn(dataset: Iterable[FeatureVector], vocabulary: Vocabulary) -> TrainedModel:
    """Estimate class priors and per-word conditional log-probabilities.

    Each vector's final element must be its true 0/1 label. For a class
    with ``n`` examples in which word *i* appears ``k`` times::

        present[i] = log((k + 1) / (n + 2))
        absent[i]  = log(1 - (k + 1) / (n + 2))

    Args:
        dataset: Featurized training examples.
        vocabulary: Vocabulary the vectors were built against.

    Returns:
        Immutable TrainedModel.

    Raises:
        EmptyCorpusError: If ``dataset`` yields no examples.
        FeatureShapeError: If a vector does not match the vocabulary.
        MalformedLabelError: If a label or feature value is not 0 or 1.
    """
    expected = len(vocabulary) + 1
    words = vocabulary.words

    # Single pass: word -> occurrence count per class
    occurrences: dict[Label, Counter[str]] = {
        Label.POSITIVE: Counter(),
        Label.NEGATIVE: Counter(),
    }
    class_sizes: Counter[Label] = Counter()

    for idx, vector in enumerate(dataset):
        _check_length(vector, expected, idx)
        label = vector[-1]
        if not _is_binary(label):
            raise MalformedLabelError(
                f"example {idx}: training label {label!r} is not 0 or 1",
                example_index=idx,
                position=expected - 1,
                value=label,
            )
        counts = occurrences[Label(label)]
        class_sizes[Label(label)] += 1
        for pos, (word, flag) in enumerate(zip(words, vector)):
            if not _is_binary(flag):
                raise MalformedLabelError(
                    f"example {idx}: feature {pos} ({word!r}) has value {flag!r}, expected 0 or 1",
                    example_index=idx,
                    position=pos,
                    value=flag,
                )
            if flag == 1:
                counts[word] += 1

    num_pos = class_sizes[Label.POSITIVE]
    num_neg = class_sizes[Label.NEGATIVE]
    if num_pos + num_neg == 0:
        raise EmptyCorpusError("cannot train on an empty corpus: class priors are undefined")

    pos_pos, neg_pos = _smoothed_log_probs(occurrences[Label.POSITIVE], words, num_pos)
    pos_neg, neg_neg = _smoothed_log_probs(occurrences[Label.NEGATIVE], words, num_neg)

    logger.debug(
        "Learned from %d examples (%d positive, %d negative) over %d words",
        num_pos + num_neg, num_pos, num_neg, len(words),
    )

    return TrainedModel(
        vocabulary=vocabulary,
        num_examples=num_pos + num_neg,
        num_pos=num_pos,
        num_neg=num_neg,
        pos_pos=pos_pos,
        neg_pos=neg_pos,
        pos_neg=pos_neg,
        neg_neg=neg_neg,
    )


def _smoothed_log_probs(
    counts: Counter[str],
    words: Sequence[str],
    class_size: int,
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Project word counts into vocabulary order as (present, absent) logs."""
    present: list[float] = []
    absent: list[float] = []
    for word in words:
        p = (counts[word] + 1) / (class_size + 2)
        present.append(math.log(p))
        absent.append(math.log(1 - p))
    return tuple(present), tuple(absent)


# ---------------------------------------------------------------------------
# Inference
# ---------------------------------------------------------------------------

def log_scores(model: TrainedModel, vector: Sequence[int]) -> tuple[float, float]:
    """Compute unnormalized (negative, positive) log posterior scores.

    The final element of ``vector`` is ignored.

    Raises:
        FeatureShapeError: If the vector length does not match the model.
        MalformedLabelError: If a feature value is not 0 or 1.
    """
    _check_length(vector, model.vector_length)

    score_neg = _log_prior(model.num_neg, model.num_examples)
    score_pos = _log_prior(model.num_pos, model.num_examples)

    for idx in range(len(model.vocabulary)):
        value = vector[idx]
        if not _is_binary(value):
            raise MalformedLabelError(
                f"feature {idx} has value {value!r}, expected 0 or 1",
                position=idx,
                value=value,
            )
        if value == 1:
            score_neg += model.pos_neg[idx]
            score_pos += model.pos_pos[idx]
        else:
            score_neg += model.neg_neg[idx]
            score_pos += model.neg_pos[idx]

    return score_neg, score_pos


def classify(model: TrainedModel, vector: Sequence[int]) -> Label:
    """Predict the label of one feature vector.

    Returns POSITIVE only when its score strictly exceeds the negative
    score; ties go to NEGATIVE.

    Raises:
        FeatureShapeError: If the vector length does not match the model.
        MalformedLabelError: If a feature value is not 0 or 1.
    """
    score_neg, score_pos = log_scores(model, vector)
    return Label.POSITIVE if score_pos > score_neg else Label.NEGATIVE


def evaluate(model: TrainedModel, dataset: Sequence[FeatureVector]) -> float:
    """Percentage of examples whose prediction matches the trailing label.

    Args:
        model: Trained model.
        dataset: Featurized examples with their true labels last.

    Returns:
        Accuracy in the range 0-100.

    Raises:
        EmptyCorpusError: If ``dataset`` is empty.
        FeatureShapeError: If a vector does not match the model, annotated
            with its example index.
        MalformedLabelError: If a true label or feature value is not 0 or 1.
    """
    if not dataset:
        raise EmptyCorpusError("cannot evaluate accuracy on an empty dataset")

    correct = 0
    for idx, vector in enumerate(dataset):
        try:
            hypothesis = classify(model, vector)
        except (MalformedLabelError, FeatureShapeError) as exc:
            raise exc.with_example_index(idx) from exc
        truth = vector[-1]
        if not _is_binary(truth):
            raise MalformedLabelError(
                f"example {idx}: true label {truth!r} is not 0 or 1",
                example_index=idx,
                position=len(vector) - 1,
                value=truth,
            )
        if hypothesis == truth:
            correct += 1

    return correct / len(dataset) * 100


def predict(model: TrainedModel, text: str) -> Label:
    """Classify a piece of free text."""
    return classify(model, featurize_query(tokenize(text), model.vocabulary))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def train_examples(
    training: Sequence[LabeledExample],
    testing: Sequence[LabeledExample],
) -> TrainingResult:
    """Build the vocabulary, learn, and score on parsed examples.

    The vocabulary comes from ``training`` only; words seen only in
    ``testing`` are not features.

    Raises:
        EmptyCorpusError: If either set is empty.
    """
    vocabulary = build_vocabulary(ex.tokens for ex in training)
    logger.debug("Vocabulary has %d words", len(vocabulary))

    featurized_train = featurize_all(training, vocabulary)
    featurized_test = featurize_all(testing, vocabulary)

    model = learn(featurized_train, vocabulary)
    train_accuracy = evaluate(model, featurized_train)
    test_accuracy = evaluate(model, featurized_test)

    logger.info("The accuracy for the training set is: %.2f%%", train_accuracy)
    logger.info("The accuracy for the testing set is: %.2f%%", test_accuracy)

    return TrainingResult(
        model=model,
        train_accuracy=train_accuracy,
        test_accuracy=test_accuracy,
        train_size=len(featurized_train),
        test_size=len(featurized_test),
    )


def train(training_lines: Iterable[str], testing_lines: Iterable[str]) -> TrainingResult:
    """Train on labeled lines and report accuracy on both sets.

    Args:
        training_lines: Raw lines, each ending in a 0/1 label.
        testing_lines: Held-out lines in the same format.

    Returns:
        TrainingResult with the model and both accuracy percentages.

    Raises:
        EmptyCorpusError: If either set has no lines.
        MalformedLabelError: If a line's trailing token is not 0 or 1.
    """
    training = [parse_labeled_line(line, n) for n, line in enumerate(training_lines, 1)]
    testing = [parse_labeled_line(line, n) for n, line in enumerate(testing_lines, 1)]
    return train_examples(training, testing)


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------

def most_informative_words(
    model: TrainedModel,
    label: Label,
    top_n: int = 20,
) -> list[tuple[str, float]]:
    """Words whose presence most favours ``label`` over the other class.

    Scores are log-likelihood ratios of presence: ``pos_pos - pos_neg``
    for POSITIVE and the reverse for NEGATIVE.

    Args:
        model: Trained model.
        label: POSITIVE or NEGATIVE.
        top_n: Number of words to return.

    Returns:
        List of (word, ratio) tuples sorted by ratio, descending.

    Raises:
        ValueError: If ``label`` is not POSITIVE or NEGATIVE.
    """
    if label not in (Label.POSITIVE, Label.NEGATIVE):
        raise ValueError(f"Unknown class: {label!r}. Known: 0 (negative), 1 (positive)")

    sign = 1 if label == Label.POSITIVE else -1
    ratios = [
        (word, round(sign * (pp - pn), 4))
        for word, pp, pn in zip(model.vocabulary.words, model.pos_pos, model.pos_neg)
    ]
    ratios.sort(key=lambda x: x[1], reverse=True)
    return ratios[:top_n]

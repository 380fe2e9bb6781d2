"""Shared test fixtures for bayes-sentiment tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bayes_sentiment.classifier import learn
from bayes_sentiment.features import build_vocabulary, featurize_all
from bayes_sentiment.models import TrainedModel
from bayes_sentiment.tokenizer import parse_labeled_line


@pytest.fixture
def assets_dir() -> Path:
    """Directory holding the bundled sample corpora."""
    return Path(__file__).parent.parent / "assets"


@pytest.fixture
def love_hate_lines() -> list[str]:
    """Two-example corpus separable by a single word."""
    return ["i love this movie 1", "i hate this movie 0"]


@pytest.fixture
def love_hate_model(love_hate_lines: list[str]) -> TrainedModel:
    """Model trained on the two-example corpus."""
    examples = [parse_labeled_line(line) for line in love_hate_lines]
    vocabulary = build_vocabulary(ex.tokens for ex in examples)
    return learn(featurize_all(examples, vocabulary), vocabulary)


@pytest.fixture
def review_lines() -> list[str]:
    """A small corpus with more positive than negative examples."""
    return [
        "A wonderful, heartfelt film! 1",
        "Great acting and a great story. 1",
        "I loved it, truly wonderful. 1",
        "Boring and far too long. 0",
        "Terrible acting, boring story. 0",
    ]


@pytest.fixture
def corpus_files(tmp_path: Path, review_lines: list[str]) -> tuple[Path, Path]:
    """Training and testing corpus files on disk."""
    train_file = tmp_path / "train.txt"
    test_file = tmp_path / "test.txt"
    train_file.write_text("\n".join(review_lines) + "\n", encoding="utf-8")
    test_file.write_text(
        "What a wonderful story 1\nSo boring 0\n",
        encoding="utf-8",
    )
    return train_file, test_file

"""Bayes Sentiment -- bag-of-words Naive Bayes for positive/negative text."""

__version__ = "0.1.0"

from .classifier import (
    classify,
    evaluate,
    learn,
    log_scores,
    most_informative_words,
    predict,
    train,
    train_examples,
)
from .config import Settings
from .corpus import load_examples, read_lines
from .errors import (
    ClassifierError,
    EmptyCorpusError,
    FeatureShapeError,
    MalformedLabelError,
)
from .features import build_vocabulary, featurize, featurize_all, featurize_query
from .models import Label, LabeledExample, TrainedModel, TrainingResult, Vocabulary
from .tokenizer import parse_labeled_line, tokenize

__all__ = [
    # Core
    "train",
    "train_examples",
    "learn",
    "classify",
    "log_scores",
    "evaluate",
    "predict",
    "most_informative_words",
    # Text and features
    "tokenize",
    "parse_labeled_line",
    "build_vocabulary",
    "featurize",
    "featurize_all",
    "featurize_query",
    # Models
    "Label",
    "LabeledExample",
    "Vocabulary",
    "TrainedModel",
    "TrainingResult",
    # Errors
    "ClassifierError",
    "EmptyCorpusError",
    "MalformedLabelError",
    "FeatureShapeError",
    # I/O and configuration
    "read_lines",
    "load_examples",
    "Settings",
]

"""Command-line interface for the sentiment classifier.

Provides ``train``, ``predict``, ``interactive`` and ``features`` commands
with rich terminal output using the ``click`` and ``rich`` libraries.
Models are not saved between runs, so every command trains first.

Usage::

    bayes-sentiment train --train assets/trainingSet.txt --test assets/testSet.txt
    bayes-sentiment predict "what a wonderful film"
    bayes-sentiment interactive
    bayes-sentiment features --top 10
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .classifier import log_scores, most_informative_words, predict, train_examples
from .config import Settings
from .corpus import load_examples
from .errors import ClassifierError
from .features import featurize_query
from .models import Label, TrainingResult
from .tokenizer import tokenize

console = Console()
err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _get_label_style(label: Label) -> str:
    """Return a rich style string for a predicted label."""
    return {
        Label.POSITIVE: "bold green",
        Label.NEGATIVE: "bold red",
    }.get(label, "")


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    sys.exit(1)


def _train_from_files(
    settings: Settings,
    train_path: Path | None,
    test_path: Path | None,
    skip_malformed: bool,
) -> TrainingResult:
    """Load both corpora, then train. Exits with status 1 on failure."""
    train_path = train_path or settings.training_set
    test_path = test_path or settings.test_set
    skip = skip_malformed or settings.skip_malformed

    with console.status("[bold blue]Training classifier...", spinner="dots"):
        try:
            training = load_examples(train_path, skip_malformed=skip)
            testing = load_examples(test_path, skip_malformed=skip)
            return train_examples(training, testing)
        except (ClassifierError, FileNotFoundError) as e:
            _fail(e)


def _corpus_options(func):
    func = click.option("--skip-malformed", is_flag=True, default=False,
                        help="Skip lines without a valid 0/1 label.")(func)
    func = click.option("--test", "test_path", type=click.Path(path_type=Path), default=None,
                        help="Testing corpus (default: BAYES_TEST_SET).")(func)
    func = click.option("--train", "train_path", type=click.Path(path_type=Path), default=None,
                        help="Training corpus (default: BAYES_TRAINING_SET).")(func)
    return func


@click.group()
@click.version_option(package_name="bayes-sentiment")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging level (default: BAYES_LOG_LEVEL or WARNING).")
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """Naive Bayes sentiment classifier.

    Trains a bag-of-words model on labeled lines (text followed by 0 or 1)
    and predicts whether new text is positive or negative.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail(e)
    _configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@main.command("train")
@_corpus_options
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def train_cmd(
    settings: Settings,
    train_path: Path | None,
    test_path: Path | None,
    skip_malformed: bool,
    output: str,
) -> None:
    """Train on the training corpus and report accuracy on both corpora.

    Example: bayes-sentiment train --train reviews.txt --test held_out.txt
    """
    result = _train_from_files(settings, train_path, test_path, skip_malformed)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _render_training(result)


@main.command("predict")
@click.argument("text", nargs=-1, required=True)
@_corpus_options
@click.pass_obj
def predict_cmd(
    settings: Settings,
    text: tuple[str, ...],
    train_path: Path | None,
    test_path: Path | None,
    skip_malformed: bool,
) -> None:
    """Predict whether TEXT is positive or negative.

    Example: bayes-sentiment predict "i love this movie"
    """
    result = _train_from_files(settings, train_path, test_path, skip_malformed)
    _render_prediction(result, " ".join(text), show_margin=True)


@main.command("interactive")
@_corpus_options
@click.pass_obj
def interactive_cmd(
    settings: Settings,
    train_path: Path | None,
    test_path: Path | None,
    skip_malformed: bool,
) -> None:
    """Train, then classify lines typed at the prompt until an empty line."""
    result = _train_from_files(settings, train_path, test_path, skip_malformed)
    _render_training(result)

    console.print(
        "Enter in your input and the classifier will predict whether "
        "the string is positive or negative."
    )
    console.print("Enter an empty string to quit")

    while True:
        try:
            user_input = click.prompt("\n>>", default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            # end of input
            console.print()
            break
        if user_input == "":
            break
        _render_prediction(result, user_input)


@main.command("features")
@_corpus_options
@click.option("--top", "-n", "top_n", type=click.IntRange(min=1), default=10,
              help="Number of words per class.")
@click.pass_obj
def features_cmd(
    settings: Settings,
    train_path: Path | None,
    test_path: Path | None,
    skip_malformed: bool,
    top_n: int,
) -> None:
    """Show the words that most strongly indicate each class."""
    result = _train_from_files(settings, train_path, test_path, skip_malformed)

    for label in (Label.POSITIVE, Label.NEGATIVE):
        table = Table(title=f"Most {label.description} words")
        table.add_column("#", justify="right", width=4)
        table.add_column("Word", style=_get_label_style(label))
        table.add_column("Log ratio", justify="right")
        for i, (word, ratio) in enumerate(most_informative_words(result.model, label, top_n), 1):
            table.add_row(str(i), word, f"{ratio:.4f}")
        console.print(table)
        console.print()


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_training(result: TrainingResult) -> None:
    model = result.model

    table = Table(title="Naive Bayes training", show_lines=False)
    table.add_column("Set", style="cyan")
    table.add_column("Examples", justify="right")
    table.add_column("Accuracy", justify="right")
    table.add_row("training", str(result.train_size), f"{result.train_accuracy:.2f}%")
    table.add_row("testing", str(result.test_size), f"{result.test_accuracy:.2f}%")
    console.print(table)

    console.print(
        f"[dim]Vocabulary: {len(model.vocabulary)} words | "
        f"positive: {model.num_pos} | negative: {model.num_neg}[/]"
    )
    console.print(f"The accuracy for the training set is: {result.train_accuracy:.2f}%")
    console.print(f"The accuracy for the testing set is: {result.test_accuracy:.2f}%")
    console.print()


def _render_prediction(result: TrainingResult, text: str, show_margin: bool = False) -> None:
    try:
        label = predict(result.model, text)
    except ClassifierError as e:
        _fail(e)

    style = _get_label_style(label)
    console.print(f"\nYour review is predicted to be [{style}]{label.description}[/].")

    if show_margin:
        vector = featurize_query(tokenize(text), result.model.vocabulary)
        score_neg, score_pos = log_scores(result.model, vector)
        console.print(f"[dim]log score positive={score_pos:.4f} negative={score_neg:.4f}[/]")


if __name__ == "__main__":
    main()

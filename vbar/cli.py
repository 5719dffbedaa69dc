"""VBAR CLI -- assess whether a work relationship leans towards employment."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from vbar import config as cfg
from vbar import display
from vbar.engine import clear_answer, evaluate, new_answer_store, set_answer
from vbar.models import AnswerStore
from vbar.questionnaire import (
    ANSWER_CODES,
    ANSWER_LABELS,
    INSTRUCTIONS,
    VBAR_QUESTIONNAIRE,
    answers_from_codes,
)

app = typer.Typer(
    name="vbar",
    help="Assess a work relationship against the VBAR employment indicators.",
    no_args_is_help=True,
)

_ANSWERS_HELP = (
    "One code per question in order: j (ja), g (gedeeltelijk), n (nee), "
    "- (skip). Spaces are ignored."
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Assess a work relationship against the VBAR employment indicators."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _resolve_threshold(threshold: Optional[float]) -> float:
    """Use the command-line threshold if given, else the configured one."""
    if threshold is None:
        return cfg.get_threshold()
    if threshold < 0:
        display.print_warning("Threshold must not be negative.")
        raise typer.Exit(1)
    return threshold


def _parse_answers(answers: str) -> AnswerStore:
    try:
        return answers_from_codes(VBAR_QUESTIONNAIRE, answers)
    except ValueError as exc:
        display.print_warning(f"Invalid answers: {exc}")
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------


@app.command()
def questions() -> None:
    """List every question with its category and weight."""
    display.print_questionnaire(VBAR_QUESTIONNAIRE)


@app.command()
def sources() -> None:
    """Show the documents the questionnaire is based on."""
    display.print_sources()


@app.command()
def assess(
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Override the configured threshold"
    ),
) -> None:
    """Answer the questionnaire interactively and get a verdict."""
    limit = _resolve_threshold(threshold)
    display.print_info(INSTRUCTIONS)

    store = new_answer_store(VBAR_QUESTIONNAIRE)
    for cat_index, cat in enumerate(VBAR_QUESTIONNAIRE.categories):
        display.console.print(f"\n[bold]{cat.name}[/bold]")
        for q_index, question in enumerate(cat.questions):
            display.console.print(f"\n  {cat.name}{q_index + 1}. {question}")
            while True:
                raw = typer.prompt("  j/g/n", default="", show_default=False)
                code = raw.strip().lower() or "-"
                if code in ANSWER_CODES:
                    break
                display.print_warning("  Please enter j, g or n (or press Enter to skip).")
            value = ANSWER_CODES[code]
            if value.is_answered:
                store = set_answer(store, cat_index, q_index, value)
                display.print_success(f"  {ANSWER_LABELS[value]}")
            else:
                store = clear_answer(store, cat_index, q_index)

    display.console.print()
    display.print_verdict(evaluate(VBAR_QUESTIONNAIRE, store, limit), VBAR_QUESTIONNAIRE)


@app.command()
def score(
    answers: str = typer.Option(..., "--answers", "-a", help=_ANSWERS_HELP),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Override the configured threshold"
    ),
) -> None:
    """Score a set of answers without prompting."""
    limit = _resolve_threshold(threshold)
    store = _parse_answers(answers)
    display.print_verdict(evaluate(VBAR_QUESTIONNAIRE, store, limit), VBAR_QUESTIONNAIRE)


@app.command()
def chart(
    answers: str = typer.Option(..., "--answers", "-a", help=_ANSWERS_HELP),
    output: Path = typer.Option(Path("vbar.png"), "--output", "-o", help="PNG file to write"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Override the configured threshold"
    ),
) -> None:
    """Save a chart of the category scores and risk indicator."""
    from vbar.charts import score_chart

    limit = _resolve_threshold(threshold)
    store = _parse_answers(answers)
    img = score_chart(VBAR_QUESTIONNAIRE, store, limit)
    output.parent.mkdir(parents=True, exist_ok=True)
    img.save(output, format="PNG")
    display.print_success(f"Chart saved to {output}")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@app.command()
def config(
    threshold: Optional[float] = typer.Option(
        None, "--threshold", help="Set the classification threshold"
    ),
    reset: bool = typer.Option(False, "--reset", help="Reset to the default configuration"),
    show: bool = typer.Option(False, "--show", help="Show current config"),
) -> None:
    """Configure the classification threshold."""
    if threshold is not None:
        try:
            result = cfg.set_threshold(threshold)
        except ValidationError:
            display.print_warning("Threshold must not be negative.")
            raise typer.Exit(1)
        display.print_success(f"Threshold set to {result.threshold:.1f}")
    elif reset:
        result = cfg.reset_config()
        display.print_success(f"Reset to default threshold {result.threshold:.1f}.")
    elif show:
        display.print_info(f"Threshold: {cfg.get_threshold():.1f}")
    else:
        display.print_info("Use --threshold, --reset, or --show.")

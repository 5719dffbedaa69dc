"""Rich terminal formatting helpers."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vbar.models import BucketKind, OutcomeState, Questionnaire, Verdict
from vbar.questionnaire import SOURCES, VERDICT_TEXT, VERDICT_TITLE, bucket_label

console = Console()

_STATE_STYLE: dict[OutcomeState, str] = {
    OutcomeState.INSUFFICIENT_DATA: "dim",
    OutcomeState.LEANS_EMPLOYMENT: "red",
    OutcomeState.UNDETERMINED: "yellow",
    OutcomeState.LEANS_SELF_EMPLOYMENT: "green",
}


def print_questionnaire(questionnaire: Questionnaire) -> None:
    """Print every category with its weighted questions."""
    for cat in questionnaire.categories:
        table = Table(show_header=True, box=None, pad_edge=False)
        table.add_column("#", width=4)
        table.add_column("weight", width=6, justify="right")
        table.add_column("question")
        for i, (question, weight) in enumerate(zip(cat.questions, cat.weights), 1):
            table.add_row(f"{cat.name}{i}", f"{weight:.1f}", question)
        title = f"{cat.name} ({cat.kind.value})"
        console.print(Panel(table, title=title, border_style="blue"))


def print_verdict(verdict: Verdict, questionnaire: Questionnaire) -> None:
    """Print the verdict panel with bucket scores and the risk indicator."""
    style = _STATE_STYLE[verdict.state]
    primary = bucket_label(questionnaire, BucketKind.PRIMARY)
    secondary = bucket_label(questionnaire, BucketKind.SECONDARY)
    scores = verdict.scores

    lines: list[str] = [
        VERDICT_TEXT[verdict.state],
        "",
        f"{primary} Score: {scores.primary:.1f}",
        f"{secondary} Score: {scores.secondary:.1f}",
        f"RI = {scores.risk_indicator:.1f}  (threshold ±{verdict.threshold:.1f})",
        "",
        f"Answered: {verdict.answered_count}/{verdict.total_questions} "
        f"({verdict.completion_pct:.0f}%)",
    ]
    text = Text("\n".join(lines))
    text.stylize(f"bold {style}", 0, len(VERDICT_TEXT[verdict.state]))
    console.print(Panel(text, title=VERDICT_TITLE[verdict.state], border_style=style))


def print_sources() -> None:
    """Print the reference documents the questionnaire is based on."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("n", width=3)
    table.add_column("source")
    for i, (title, url) in enumerate(SOURCES, 1):
        table.add_row(f"{i}.", f"{title}\n[blue]{url}[/blue]")
    console.print(Panel(table, title="Bronnen", border_style="dim"))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]{message}[/blue]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{message}[/yellow]")

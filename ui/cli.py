"""Command Line Interface (CLI) for user interaction and result display."""

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt
from rich.panel import Panel
from rich.text import Text

import config
from utils.logger import get_logger
from utils.error_handler import UserCancelledError
from core.results import GradeReport, ScenarioResult

logger = get_logger()
console = Console()

BAND_STYLES = {
    "excellent": "bold green",
    "good": "bold yellow",
    "poor": "bold red",
}

def display_welcome():
    """Displays a welcome message."""
    console.print(Panel(
        "[bold green]🚀 C Positive Sum Grader 🚀[/bold green]",
        title="Welcome",
        border_style="blue"
    ))
    console.print("Exercise: read 5 positive integers (asking again on 0 or negative input) and print their sum.")
    console.print(f"Each test runs with a {config.EXECUTION_TIMEOUT_MS} ms limit.")
    console.rule()

def display_farewell():
    """Displays a farewell message."""
    console.rule()
    console.print("[bold cyan]👋 Grading complete. Exiting.[/bold cyan]")

def display_error(message: str):
    """Displays an error message in a standard format."""
    console.print(Panel(f"[bold red]Error:[/bold red] {message}", title="Error", border_style="red"))

def display_warning(message: str):
    """Displays a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")

def running_status(message: str = "Running tests..."):
    """Spinner shown while a grading run is in flight."""
    return console.status(f"[bold blue]{message}[/bold blue]", spinner="dots")

def prompt_for_source_path() -> str:
    """Asks the user for the path of the C file to grade.

    Raises:
        UserCancelledError: If the user enters nothing.
    """
    path = Prompt.ask("Path to the C source file (leave empty to cancel)", default="", show_default=False)
    if not path.strip():
        raise UserCancelledError("No source file given.")
    logger.info(f"User entered source path: {path.strip()}")
    return path.strip()

def score_band(score: int) -> str:
    """Maps a score to its display band: excellent (85+), good (60+) or poor."""
    if score >= 85:
        return "excellent"
    if score >= 60:
        return "good"
    return "poor"

def render_results_table(results: Sequence[ScenarioResult]) -> Table:
    """Builds the per-scenario results table."""
    table = Table(title="Test Results", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Test", style="cyan")
    table.add_column("Input", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Notes")

    for i, result in enumerate(results):
        status = Text("✓", style="bold green") if result.passed else Text("✗", style="bold red")
        table.add_row(
            str(i + 1),
            result.name,
            result.scenario.display_input,
            status,
            Text(result.note),
        )
    return table

def display_report(report: GradeReport):
    """Renders a full grade report: execution status, score, feedback and test table."""
    failed = next((r for r in report.results if r.compilation_failed), None)
    if failed is not None:
        console.print(Panel(Text(failed.note), title=f"Compilation / Execution ({failed.name})", border_style="red"))
    else:
        console.print("[green]✅ The code compiled and ran successfully.[/green]")

    style = BAND_STYLES[score_band(report.score)]
    console.print(Panel(
        Text.assemble((f"{report.score}", style), " / 100\n\n", (report.feedback_text, style)),
        title="Score",
        border_style=style.split()[-1],
    ))
    console.print(render_results_table(report.results))

def display_run_error(message: str):
    """Renders a run that aborted unexpectedly: error text and a forced score of 0."""
    display_error(message)
    console.print(Panel(
        Text.assemble(("0", BAND_STYLES["poor"]), " / 100\n\n", "An error occurred while testing."),
        title="Score",
        border_style="red",
    ))

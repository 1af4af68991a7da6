#!/usr/bin/env python3
"""
🚀 Numbers Game Launcher
Command-line entry point of the genetic numbers game solver
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core import __version__
from core.config import get_settings
from core.logger import get_logger, setup_logging
from genetic import GeneticSolver, SolveResult, SolverStatus

console = Console()
app = typer.Typer(help="🔢 Genetic algorithm solver for the six-number arithmetic game")

logger = get_logger(__name__)


def display_banner():
    """Display the startup banner"""
    banner = Text.assemble(
        ("🔢 ", "bold blue"),
        ("NUMBERS-GA", "bold white"),
        (f" v{__version__}\n", "dim"),
        ("Genetic search for the six-number game", "italic")
    )
    console.print(Panel(banner, border_style="blue", padding=(1, 2)))


def prompt_numbers() -> List[int]:
    """Ask the user for the six numbers, one per prompt"""
    return [typer.prompt(f"Number {i + 1}", type=int) for i in range(6)]


def display_result(result: SolveResult):
    """Print the generation count, elapsed time and best expression"""
    table = Table(show_header=False, box=None)
    table.add_row("Numbers", " ".join(str(n) for n in result.numbers))
    table.add_row("Target", str(result.target))
    table.add_row("Generations", str(result.generations))
    table.add_row("Elapsed", f"{result.elapsed_ms:.0f} ms")
    table.add_row("Expression", result.expression)
    value = result.value
    table.add_row("Value", "invalid" if value is None else str(value))
    table.add_row("Distance", f"{result.best.fitness():g}")

    if result.status is SolverStatus.EXACT:
        title = "[bold green]EXACT SOLUTION[/bold green]"
        border_style = "green"
    else:
        title = "[bold yellow]CLOSEST SOLUTION[/bold yellow]"
        border_style = "yellow"

    console.print(Panel(table, title=title, border_style=border_style, padding=(1, 2)))


@app.command()
def solve(
    numbers: Optional[List[int]] = typer.Argument(None, help="The six numbers to combine"),
    target: Optional[int] = typer.Option(None, "--target", "-t", help="Value to reach"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible runs"),
    population: Optional[int] = typer.Option(None, help="Population size"),
    generations: Optional[int] = typer.Option(None, help="Maximum number of generations"),
    output: Optional[Path] = typer.Option(None, help="Write the result as JSON to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every generation"),
):
    """🧬 Search for the expression closest to the target"""
    settings = get_settings()
    overrides = {}
    if verbose:
        overrides["log_level"] = "DEBUG"
    if seed is not None:
        overrides["random_seed"] = seed
    if population is not None:
        overrides["population_size"] = population
    if generations is not None:
        overrides["max_generations"] = generations
    settings = settings.model_copy(update=overrides)

    setup_logging(settings)
    display_banner()

    if not numbers:
        numbers = prompt_numbers()
    if target is None:
        target = typer.prompt("Target", type=int)

    try:
        solver = GeneticSolver.from_settings(settings)
        result = solver.solve(numbers, target)
    except ValueError as e:
        console.print(f"[bold red]❌ Invalid input:[/bold red] {e}")
        raise typer.Exit(2)

    display_result(result)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2)
        console.print(f"💾 Result saved to {output}")
        logger.info(f"Result saved to {output}")


@app.command()
def version():
    """📋 Display the version"""
    console.print(f"🔢 numbers-ga v{__version__}")


if __name__ == "__main__":
    app()

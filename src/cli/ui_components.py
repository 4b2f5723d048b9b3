"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets `run`, `run-all` and `doctor` reuse tables and panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CatalogReport, ExampleRun, PatternInfo


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Lives here to avoid circular imports (main <-> doctor) and so non
    interactive modes can skip it.
    """

    title = Text("PATTERN CATALOG", style="bold cyan")
    subtitle = Text("Creational • Structural • Behavioral", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_patterns_table(patterns: list[PatternInfo]) -> Table:
    table = Table(title="Design Patterns")
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Variants", style="green")
    table.add_column("Intent", style="dim")
    for info in patterns:
        table.add_row(
            info.name,
            info.title,
            info.category.label(),
            ", ".join(v.value for v in info.variants),
            info.intent,
        )
    return table


def build_pattern_panel(info: PatternInfo, modules: dict[str, str]) -> Panel:
    """Details for `show`: intent, aliases and one line per variant module."""

    body = Text()
    body.append(info.intent + "\n\n")
    body.append("Category: ", style="bold")
    body.append(info.category.label() + "\n")
    if info.aliases:
        body.append("Aliases: ", style="bold")
        body.append(", ".join(info.aliases) + "\n")
    body.append("\nVariants:\n", style="bold")
    for variant in info.variants:
        summary = modules.get(variant.value, "")
        body.append(f"- {variant.label()}: ", style="green")
        body.append(f"python -m {info.module_for(variant)}\n")
        if summary:
            body.append(f"  {summary}\n", style="dim")

    return Panel(body, title=Text(info.title, style="bold yellow"), border_style="yellow")


def build_run_panel(run: ExampleRun) -> Panel:
    """Captured output of one example. Output is shown verbatim, no markup."""

    body = Text(run.output.rstrip("\n") or "(no output)")
    if run.error:
        body.append("\n\n" + run.error, style="bold red")
    style = "green" if run.succeeded else "red"
    subtitle = Text(f"{run.duration_seconds:.3f}s", style="dim")
    return Panel(body, title=Text(run.label, style=f"bold {style}"), subtitle=subtitle, border_style=style)


def build_summary_table(report: CatalogReport) -> Table:
    table = Table(title="Run Summary")
    table.add_column("Example", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Duration", style="dim", justify="right")
    table.add_column("Error", style="red")
    for run in report.runs:
        table.add_row(
            run.label,
            "[green]OK[/green]" if run.succeeded else "[red]FAILED[/red]",
            f"{run.duration_seconds:.3f}s",
            run.error or "",
        )
    return table

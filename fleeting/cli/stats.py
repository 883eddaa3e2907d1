"""Writing statistics command for Fleeting CLI."""

import click
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fleeting.cli.main import get_entry_store
from fleeting.stats import calculate_writing_stats

console = Console()

BAR_WIDTH = 40


def render_bar(count: int, max_count: int, width: int = BAR_WIDTH) -> str:
    """Horizontal bar scaled against the busiest day."""
    if max_count <= 0 or count <= 0:
        return ""
    return "█" * max(1, round(count / max_count * width))


@click.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show words written per day.

    Displays total words, average words per writing day, the longest
    streak of consecutive days, and a bar chart of daily word counts.

    \b
    Examples:
      fleeting stats
    """
    from fleeting.cli.display import format_entry_date

    store = get_entry_store(ctx)
    summary = calculate_writing_stats(store.word_counts_by_day())

    console.print(Columns([
        Panel(f"[bold]{summary.total_words}[/bold]", title="Total", border_style="cyan"),
        Panel(f"[bold]{summary.average_words}[/bold]", title="Average", border_style="cyan"),
        Panel(f"[bold]{summary.longest_streak}[/bold]", title="Streak", border_style="cyan"),
    ]))

    if not summary.days:
        console.print("[dim]No entries yet[/dim]")
        return

    max_count = max(item.count for item in summary.days)

    table = Table(
        title="Words per Day",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Day", style="bold")
    table.add_column("Words", justify="right")
    table.add_column("")

    for item in summary.days:
        table.add_row(
            format_entry_date(item.day),
            str(item.count),
            f"[blue]{render_bar(item.count, max_count)}[/blue]",
        )

    console.print(table)

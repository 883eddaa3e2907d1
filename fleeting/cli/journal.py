"""Journal commands for Fleeting CLI.

Handles writing today's entry and reading the timeline.
"""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from fleeting.cli.display import entry_style, format_entry_date
from fleeting.cli.main import get_entry_store

console = Console()


@click.command()
@click.argument("text", required=False)
@click.pass_context
def write(ctx: click.Context, text: Optional[str]) -> None:
    """Write today's entry.

    TEXT replaces today's entry. Without TEXT, your editor opens with
    today's entry so you can keep writing.

    \b
    Examples:
      fleeting write "Walked to the lake before work."
      fleeting write            # Edit in $EDITOR
    """
    store = get_entry_store(ctx)

    if text is None:
        text = click.edit(store.draft)
        if text is None:
            console.print("[dim]Editor closed without saving. Nothing written.[/dim]")
            return

    store.set_draft(text)

    if not store.draft.strip():
        console.print("[dim]Nothing to save.[/dim]")
        return

    if not store.save_draft():
        console.print(Panel(
            "[red]Could not save today's entry.[/red]\n\n"
            "Your text was not written. Check the log output above and try again.",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    entry = store.entry_for_today()
    words = entry.word_count if entry else 0
    console.print(f"[green]Saved today's entry ({words} words).[/green]")


@click.command()
@click.pass_context
def today(ctx: click.Context) -> None:
    """Show today's entry.

    \b
    Examples:
      fleeting today
    """
    store = get_entry_store(ctx)
    entry = store.entry_for_today()

    if entry is None:
        console.print(Panel(
            "[dim]Nothing written today yet.[/dim]\n\n"
            "Run [cyan]fleeting write[/cyan] to start.",
            title=f"[bold]{format_entry_date(store.today())}[/bold]",
            border_style="dim",
        ))
        return

    console.print(Panel(
        entry.content,
        title=f"[bold]{format_entry_date(entry.day)}[/bold]",
        subtitle=f"[dim]{entry.word_count} words[/dim]",
        border_style="cyan",
        style=entry_style(ctx.obj.get("config", {})),
    ))


@click.command()
@click.option(
    "--limit", "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Show only the most recent N entries.",
)
@click.pass_context
def timeline(ctx: click.Context, limit: Optional[int]) -> None:
    """Show journal entries, newest first.

    \b
    Examples:
      fleeting timeline
      fleeting timeline -n 7
    """
    from fleeting.themes import next_theme, random_theme

    store = get_entry_store(ctx)
    entries = store.entries

    if not entries:
        console.print(Panel(
            "[dim]No journal entries found[/dim]",
            title="[bold]Timeline[/bold]",
            border_style="dim",
        ))
        return

    if limit is not None:
        entries = entries[:limit]

    style = entry_style(ctx.obj.get("config", {}))
    current_theme = random_theme()
    console.print(f"[dim]~ {current_theme} ~[/dim]\n")

    for index, entry in enumerate(entries):
        # Moving back a day may change the background
        if index:
            current_theme, changed = next_theme(current_theme)
            if changed:
                console.print(f"[dim]~ {current_theme} ~[/dim]\n")

        console.print(Panel(
            entry.content,
            subtitle=f"[dim]{format_entry_date(entry.day)}[/dim]",
            border_style="dim",
            style=style,
            padding=(1, 4),
        ))

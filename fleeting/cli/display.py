"""Display helpers and the theme command for Fleeting CLI."""

from datetime import date

import click
from rich.console import Console
from rich.panel import Panel

from fleeting.themes import font_display_name, next_font_size, random_theme

console = Console()


def format_entry_date(day: date) -> str:
    """Label used under each entry, e.g. ``Monday, Oct 19``."""
    return f"{day:%A, %b} {day.day}"


def entry_style(config: dict) -> str:
    """Text style for entry bodies under the configured colour scheme."""
    from fleeting.config import get_display_settings

    return "grey85" if get_display_settings(config)["dark_mode"] else "grey23"


@click.command()
@click.option(
    "--next-size",
    is_flag=True,
    default=False,
    help="Switch to the next font size and save it to the config file.",
)
@click.pass_context
def theme(ctx: click.Context, next_size: bool) -> None:
    """Pick a random ambient theme and show display settings.

    \b
    Examples:
      fleeting theme
      fleeting theme --next-size
    """
    from fleeting.config import get_display_settings, save_display_setting

    settings = get_display_settings(ctx.obj.get("config", {}))

    if next_size:
        settings["font_size"] = next_font_size(settings["font_size"])
        try:
            path = save_display_setting("font_size", settings["font_size"], ctx.obj.get("config_path"))
        except OSError as e:
            console.print(Panel(
                f"[red]Could not update config: {e}[/red]",
                title="[bold red]Error[/bold red]",
                border_style="red",
            ))
            raise SystemExit(1)
        console.print(f"[green]Font size set to {settings['font_size']}px in {path}[/green]")

    mode = "dark" if settings["dark_mode"] else "light"

    console.print(Panel(
        f"Background: [bold]{random_theme()}[/bold]\n"
        f"Font: {font_display_name(settings['font'])} {settings['font_size']}px\n"
        f"Mode: {mode}",
        title="[bold cyan]Theme[/bold cyan]",
        border_style="cyan",
    ))

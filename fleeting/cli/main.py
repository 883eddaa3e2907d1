"""Main CLI entry point for Fleeting.

This module provides the main click group, lazy loading of subcommands,
logging setup, and construction of the entry store shared by commands.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when they are actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        attr = getattr(module, cmd_name, None)
        if not isinstance(attr, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(attr)
        return attr


LAZY_SUBCOMMANDS = {
    "write": "fleeting.cli.journal",
    "today": "fleeting.cli.journal",
    "timeline": "fleeting.cli.journal",
    "stats": "fleeting.cli.stats",
    "theme": "fleeting.cli.display",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(level: int) -> None:
    """Send ``fleeting`` log records to stderr through rich."""
    package_logger = logging.getLogger("fleeting")
    package_logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Journal database file (overrides the config file).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to read instead of ~/.config/fleeting/config.toml.",
)
@click.version_option(package_name="fleeting")
@click.pass_context
def cli(ctx: click.Context, db_path: Optional[Path], config_path: Optional[Path]) -> None:
    """Fleeting - one journal entry a day.

    Write a little every day; each save replaces today's entry.

    \b
    Quick Start:
      fleeting write "text"    # Save today's entry
      fleeting timeline        # Read past entries, newest first
      fleeting stats           # Words per day and streaks
    """
    from fleeting.config import get_db_path, get_log_level, load_config

    config = load_config(config_path)
    setup_logging(get_log_level(config))

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path
    ctx.obj["db_path"] = db_path or get_db_path(config)


def get_entry_store(ctx: click.Context):
    """Build the entry store for this invocation.

    The store is created once per command run and cached on the context.
    """
    from fleeting.journal import open_entry_store

    obj = ctx.ensure_object(dict)
    if "store" not in obj:
        obj["store"] = open_entry_store(obj.get("db_path") or _default_db_path())
    return obj["store"]


def _default_db_path() -> Path:
    from fleeting.config import DEFAULT_DB_PATH

    return DEFAULT_DB_PATH


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

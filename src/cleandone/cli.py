"""cleandone CLI - keep checklist notes tidy."""

import logging
import sys
from dataclasses import replace

import click

from .adapters.console_notifier import ConsoleNotifier
from .config import CONFIG_FILE, config_items, load_config, save_config, set_option
from .core.insertion import InsertPosition
from .errors import ConfigError
from .workflows import (
    DocumentChanged,
    Outcome,
    add_todo,
    clean_note,
    get_store,
    handle_document_changed,
    reorder_note,
)


def _finish(outcome: Outcome) -> None:
    if outcome is Outcome.FAILED:
        sys.exit(1)


@click.group()
@click.version_option(package_name="cleandone")
@click.option("--vault", type=click.Path(file_okay=False), default=None,
              help="Vault directory (overrides VAULT_DIR)")
@click.option("--quiet", "-q", is_flag=True, help="Only print errors")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, vault: str | None, quiet: bool, debug: bool):
    """cleandone - Clean done todos from markdown notes."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if vault:
        config = replace(config, vault_dir=vault)

    ctx.obj = {
        "config": config,
        "notifier": ConsoleNotifier(quiet=quiet),
    }


@main.command()
@click.argument("note", required=False)
@click.option("--days", type=click.IntRange(min=0), default=None,
              help="Keep items completed within the last N days")
@click.pass_obj
def clean(obj, note: str | None, days: int | None):
    """Remove completed todos older than the threshold."""
    config = obj["config"]
    if days is not None:
        config = replace(config, days_threshold=days)
    outcome = clean_note(config, get_store(config), obj["notifier"], note)
    _finish(outcome)


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--note", "-n", default=None, help="Note to add to (default: TODO_NOTE_FILENAME)")
@click.option("--position", "-p", type=click.Choice([p.value for p in InsertPosition]),
              default=None, help="Where to insert the todo")
@click.pass_obj
def add(obj, text: tuple[str, ...], note: str | None, position: str | None):
    """Add a new todo to the todo note."""
    config = obj["config"]
    outcome = add_todo(
        config,
        get_store(config),
        obj["notifier"],
        " ".join(text),
        identifier=note,
        position=InsertPosition(position) if position else None,
    )
    _finish(outcome)


@main.command()
@click.argument("note", required=False)
@click.pass_obj
def reorder(obj, note: str | None):
    """Move checked todos to the bottom of a note."""
    config = obj["config"]
    outcome = reorder_note(config, get_store(config), obj["notifier"], note)
    _finish(outcome)


@main.command()
@click.argument("note")
@click.pass_obj
def changed(obj, note: str):
    """Notify that NOTE was edited (runs auto move when enabled)."""
    config = obj["config"]
    outcome = handle_document_changed(
        DocumentChanged(note), config, get_store(config), obj["notifier"]
    )
    _finish(outcome)


@main.group("config", invoke_without_command=True)
@click.pass_context
def config_group(ctx):
    """Show or change settings."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(config_show)


@config_group.command("show")
@click.pass_obj
def config_show(obj):
    """Print the current settings."""
    click.echo(f"# {CONFIG_FILE}")
    for key, value in config_items(obj["config"]):
        click.echo(f"{key.upper()}={value}")


@config_group.command("set", context_settings={"ignore_unknown_options": True})
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Change one setting and save it."""
    try:
        config = set_option(load_config(), key, value)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    path = save_config(config)
    click.echo(f"✓ Saved to {path}")


if __name__ == "__main__":
    main()

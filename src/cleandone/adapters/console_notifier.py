"""Console notice adapter."""

import click


class ConsoleNotifier:
    """
    Prints notices to the terminal.

    Implements Notifier protocol. Errors go to stderr.
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def notify(self, message: str, *, error: bool = False) -> None:
        if self.quiet and not error:
            return
        click.echo(message, err=error)

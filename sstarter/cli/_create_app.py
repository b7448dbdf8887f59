"""Create the main Typer CLI app."""

import logging

import typer

from sstarter.cli.config import config
from sstarter.cli.service import service


def _configured_log_level() -> int:
    """Level from the ``log`` section of the config file; INFO when the file cannot be loaded."""
    from sstarter.api.config.StarterConfig import StarterConfig

    try:
        return StarterConfig.load().log.python_level()
    except ValueError:
        # The command itself reports the broken config
        return logging.INFO


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="sstarter CLI - run services under a graceful-restart helper",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(service(), name="service")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Log debug messages to sstarter.log"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        from sstarter.utils.logger import configure_logging

        configure_logging(level=logging.DEBUG if verbose else _configured_log_level())

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app

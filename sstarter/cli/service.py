"""Service Typer app factory."""

import typer

from sstarter.api.service.cmd_list import cmd_list
from sstarter.api.service.cmd_reload import cmd_reload
from sstarter.api.service.cmd_restart import cmd_restart
from sstarter.api.service.cmd_show import cmd_show
from sstarter.api.service.cmd_start import cmd_start
from sstarter.api.service.cmd_status import cmd_status
from sstarter.api.service.cmd_stop import cmd_stop
from sstarter.cli._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Start, stop, reload and inspect managed services",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd() -> None:
        """List configured services."""
        _handle_stage_result(cmd_list)()

    @app.command(name="show")
    def show_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Show resolved paths and helper command lines."""
        _handle_stage_result(cmd_show)(name)

    @app.command(name="status")
    def status_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Check service status."""
        _handle_stage_result(cmd_status)(name)

    @app.command(name="start")
    def start_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Start service."""
        _handle_stage_result(cmd_start)(name)

    @app.command(name="stop")
    def stop_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Stop service."""
        _handle_stage_result(cmd_stop)(name)

    @app.command(name="reload")
    def reload_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Restart the target in place through the helper."""
        _handle_stage_result(cmd_reload)(name)

    @app.command(name="restart")
    def restart_cmd(name: str = typer.Argument(..., help="Service name")) -> None:
        """Stop and start service."""
        _handle_stage_result(cmd_restart)(name)

    return app

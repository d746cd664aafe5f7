"""Service Typer app factory."""

from pathlib import Path

import typer

from hostsvc.api.service.cmd_install import cmd_install
from hostsvc.api.service.cmd_restart import cmd_restart
from hostsvc.api.service.cmd_start import cmd_start
from hostsvc.api.service.cmd_status import cmd_status
from hostsvc.api.service.cmd_stop import cmd_stop
from hostsvc.api.service.cmd_uninstall import cmd_uninstall
from hostsvc.cli._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="System service install/uninstall/control",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        config: Path | None = typer.Option(  # noqa: B008
            None, "--config", "-c", help="Config file (default: $HOSTSVC_HOME/config.json)"
        ),
    ) -> None:
        """Service operations - shows available commands."""
        ctx.ensure_object(dict)
        ctx.obj["config_path"] = config
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    def _config_path(ctx: typer.Context) -> Path | None:
        return (ctx.obj or {}).get("config_path")

    @app.command(name="install")
    def install_cmd(ctx: typer.Context) -> None:
        """Install system service."""
        _handle_stage_result(cmd_install)(config_path=_config_path(ctx))

    @app.command(name="uninstall")
    def uninstall_cmd(ctx: typer.Context) -> None:
        """Uninstall system service."""
        _handle_stage_result(cmd_uninstall)(config_path=_config_path(ctx))

    @app.command(name="start")
    def start_cmd(ctx: typer.Context) -> None:
        """Start service."""
        _handle_stage_result(cmd_start)(config_path=_config_path(ctx))

    @app.command(name="stop")
    def stop_cmd(ctx: typer.Context) -> None:
        """Stop service."""
        _handle_stage_result(cmd_stop)(config_path=_config_path(ctx))

    @app.command(name="restart")
    def restart_cmd(ctx: typer.Context) -> None:
        """Restart service."""
        _handle_stage_result(cmd_restart)(config_path=_config_path(ctx))

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Check service status."""
        _handle_stage_result(cmd_status)(config_path=_config_path(ctx))

    return app

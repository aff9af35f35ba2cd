"""Create the main Typer CLI app."""

import logging

import typer

from shortlinks.api.config.ShortlinksConfig import ShortlinksConfig
from shortlinks.cli.scan import scan
from shortlinks.logging_config import setup_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="shortlinks CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(scan(), name="scan")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: yaml, json or rich"),
        log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR (default: config)"),
    ) -> None:
        if display not in ("yaml", "json", "rich"):
            typer.echo(f"Error: --display must be 'yaml', 'json' or 'rich', got '{display}'", err=True)
            raise typer.Exit(2)

        # Loaded once here; commands report their own error when it is missing
        try:
            config: ShortlinksConfig | None = ShortlinksConfig.load()
        except ValueError:
            config = None

        if log_level is None:
            log_level = config.log.level if config is not None else "WARNING"
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            typer.echo(f"Error: --log-level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'", err=True)
            raise typer.Exit(2)
        setup_logging(level=getattr(logging, log_level))

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["config"] = config

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app

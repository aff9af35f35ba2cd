"""Scan Typer app factory."""

from pathlib import Path

import typer

from shortlinks.api.scan.cmd_scan import cmd_scan
from shortlinks.api.scan.cmd_scan_file import cmd_scan_file
from shortlinks.api.scan.OverflowPolicy import OverflowPolicy
from shortlinks.cli._handle_stage_result import _handle_stage_result


def scan() -> typer.Typer:
    """Create and configure the scan Typer app."""
    app = typer.Typer(
        name="scan",
        help="Find shortlinks (#123, owner/repo#123) in text",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="text")
    def text_cmd(
        ctx: typer.Context,
        text: str = typer.Argument(..., help="Text to scan"),
        owner: str | None = typer.Option(None, help="Owner for bare #N references (default: config)"),
        repo: str | None = typer.Option(None, help="Repo for bare #N references (default: config)"),
        overflow: OverflowPolicy | None = typer.Option(None, help="Oversized issue numbers: reject or saturate"),
    ) -> None:
        """Scan a string given on the command line."""
        _handle_stage_result(cmd_scan, ctx)(
            text=text,
            owner=owner,
            repo=repo,
            overflow=overflow.value if overflow else None,
            config=(ctx.obj or {}).get("config"),
        )

    @app.command(name="file")
    def file_cmd(
        ctx: typer.Context,
        path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to scan"),
        owner: str | None = typer.Option(None, help="Owner for bare #N references (default: config)"),
        repo: str | None = typer.Option(None, help="Repo for bare #N references (default: config)"),
        overflow: OverflowPolicy | None = typer.Option(None, help="Oversized issue numbers: reject or saturate"),
    ) -> None:
        """Scan the contents of a UTF-8 text file."""
        _handle_stage_result(cmd_scan_file, ctx)(
            path=path,
            owner=owner,
            repo=repo,
            overflow=overflow.value if overflow else None,
            config=(ctx.obj or {}).get("config"),
        )

    return app

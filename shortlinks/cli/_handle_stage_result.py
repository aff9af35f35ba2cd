"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("yaml", "json", "rich")


def _handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, in the --display format stored on ``ctx.obj``)
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    display_format = obj.get("display_format")
    if display_format not in DISPLAY_FORMATS:
        display_format = "yaml"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]

"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import TypeVar

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands handle their own errors and report them through StageResult.
    """
    # Stage 1: Announce
    result = func(*args, **kwargs)
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result, details="; ".join(result.output.get("errors", [])))

    # Stage 4: Output
    if display_format == "rich":
        if result.success:
            display.document_output(result.output["segments"])
    else:
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)

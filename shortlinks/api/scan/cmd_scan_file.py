"""Scan file API command.

CLI: shortlinks scan file <path> [--owner O --repo R] [--overflow reject|saturate]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from ..StageResult import StageResult
from ._failure_output import _failure_output
from ._scan_work import _scan_work

if TYPE_CHECKING:
    from ..config.ShortlinksConfig import ShortlinksConfig


def cmd_scan_file(
    path: str | Path,
    owner: str | None = None,
    repo: str | None = None,
    overflow: str | None = None,
    config: "ShortlinksConfig | None" = None,
) -> StageResult:
    """Scan a UTF-8 text file for shortlinks.

    Unreadable or non-UTF-8 files are reported as a failed result.
    """
    file_path = Path(path)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, f"Reading {file_path}...")
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot read {file_path}: {e}"
            result_obj.output = _failure_output("", [str(e)])
            result_obj.success = False
            return
        yield from _scan_work(result_obj, text, owner, repo, overflow, config)

    return StageResult(
        announce=f"Scanning {file_path} for shortlinks...",
        progress_callback=do_work,
    )

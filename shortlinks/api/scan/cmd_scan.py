"""Scan API command.

CLI: shortlinks scan text <text> [--owner O --repo R] [--overflow reject|saturate]
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from ..StageResult import StageResult
from ._scan_work import _scan_work

if TYPE_CHECKING:
    from ..config.ShortlinksConfig import ShortlinksConfig


def cmd_scan(
    text: str,
    owner: str | None = None,
    repo: str | None = None,
    overflow: str | None = None,
    config: "ShortlinksConfig | None" = None,
) -> StageResult:
    """Scan text for shortlinks and build its styled document.

    Args:
        text: Text to scan.
        owner: Default owner for bare shortlinks; read from config when omitted.
        repo: Default repo for bare shortlinks; read from config when omitted.
        overflow: 'reject' or 'saturate'; read from config (or 'reject') when omitted.
        config: Already loaded configuration; loaded from disk when needed and omitted.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _scan_work(result_obj, text, owner, repo, overflow, config)

    return StageResult(
        announce="Scanning text for shortlinks...",
        progress_callback=do_work,
    )

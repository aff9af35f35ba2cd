"""Shared progress work of the scan commands."""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from ..StageResult import StageResult
from ._failure_output import _failure_output

if TYPE_CHECKING:
    from ..config.ShortlinksConfig import ShortlinksConfig


def _scan_work(
    result_obj: StageResult,
    text: str,
    owner: str | None,
    repo: str | None,
    overflow: str | None,
    config: "ShortlinksConfig | None",
) -> Iterator[tuple[float, str]]:
    """Resolve the context, scan ``text`` and fill ``result_obj``.

    ``config`` is loaded from disk when it is needed and not given.
    """
    from ..config.ShortlinksConfig import ShortlinksConfig
    from ..segment.build import build
    from .Context import Context
    from .OverflowPolicy import OverflowPolicy
    from .scan import scan

    yield (0.1, "Resolving context...")
    context_owner, context_repo, policy_name = owner, repo, overflow
    if context_owner is None or context_repo is None:
        if config is None:
            try:
                config = ShortlinksConfig.load()
            except ValueError as e:
                yield (1.0, "Complete")
                result_obj.result = f"Cannot resolve default context: {e}"
                result_obj.output = _failure_output(text, [str(e)])
                result_obj.success = False
                return
        context_owner = context_owner if context_owner is not None else config.context.owner
        context_repo = context_repo if context_repo is not None else config.context.repo
        policy_name = policy_name if policy_name is not None else config.scan.overflow

    try:
        policy = OverflowPolicy(policy_name or OverflowPolicy.REJECT.value)
    except ValueError:
        yield (1.0, "Complete")
        message = f"Invalid overflow policy: {policy_name!r} (expected 'reject' or 'saturate')"
        result_obj.result = message
        result_obj.output = _failure_output(text, [message])
        result_obj.success = False
        return

    context = Context(owner=context_owner, repo=context_repo)

    yield (0.4, f"Scanning {len(text)} characters...")
    matches = scan(text, context, policy)

    yield (0.8, "Building segments...")
    document = build(text, matches)

    yield (1.0, "Complete")
    result_obj.output = {
        "text": text,
        "context": {"owner": context.owner, "repo": context.repo},
        "overflow": policy.value,
        "matches": [match.to_dict() for match in matches],
        "segments": [segment.to_dict() for segment in document],
        "errors": [],
    }
    result_obj.result = f"Found {len(matches)} shortlink{'s' if len(matches) != 1 else ''}"
    result_obj.success = True

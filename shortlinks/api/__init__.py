"""API module for shortlinks.

Pure scanning and segment building live in ``scan`` and ``segment``;
``cmd_*`` functions wrap them in the StageResult pattern for the CLI.
"""

__all__ = []

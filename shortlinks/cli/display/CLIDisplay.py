"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from shortlinks.api.segment.ATTRIBUTE_KEYS import LINK_COLOR_KEY
from shortlinks.api.segment.LinkColor import LinkColor

# Rich styles for the link colour markers
LINK_STYLES: dict[str, str] = {
    LinkColor.ISSUE.value: "underline bright_blue",
}


class CLIDisplay:
    """Status lines on stderr, command output on stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, details: str = "") -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def json_output(self, data: Any, format: str = "yaml", indent: int = 2) -> None:
        if format == "yaml":
            print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False))

    def document_output(self, segments: list[dict[str, Any]]) -> None:
        """Print segment dicts as one text with linked spans styled."""
        text = Text()
        for segment in segments:
            color = segment.get("attributes", {}).get(LINK_COLOR_KEY)
            text.append(segment["text"], style=LINK_STYLES.get(color, "") if color else "")
        self.console.print(text, soft_wrap=True, end="\n" if text.plain and not text.plain.endswith("\n") else "")

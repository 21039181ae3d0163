"""
Rendering of decoded response bodies and request errors for the terminal.
"""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .._exceptions import RequestError, ResponseError, response_error


class ResultDisplay:
    """Writes successful results to stdout and errors to stderr."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def show_result(self, value: Any, expect: str) -> None:
        """Print the decoded value in a form suited to the parser that produced it."""
        if expect == "json":
            self.console.print_json(data=value, highlight=self.console.is_terminal)
        elif expect == "text":
            self.console.print(Text(value))
        elif expect == "bytes":
            sys.stdout.buffer.write(value)
            sys.stdout.buffer.flush()
        # "none": nothing was read

    def show_error(self, err: RequestError) -> None:
        """Print a panel describing the failed request."""
        resp_err = response_error(err)
        if resp_err is None:
            self.err_console.print(
                Panel(Text(str(err)), title="Request failed", border_style="red")
            )
            return

        self.err_console.print(
            Panel(
                Text(self._describe(resp_err)),
                title=f"{err.method} {err.path} → HTTP {resp_err.status_code}",
                border_style="red" if resp_err.is_5xx else "yellow",
            )
        )

    @staticmethod
    def _describe(err: ResponseError) -> str:
        lines = [err.message]
        if isinstance(err.body, (dict, list)):
            lines.append("")
            lines.append(json.dumps(err.body, indent=2, ensure_ascii=False))
        return "\n".join(lines)

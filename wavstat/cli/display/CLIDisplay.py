"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape

from .Display import Display


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


class CLIDisplay(Display):
    """CLI display using Rich: messages on stderr, results on stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def _stamped(self, icon: str, message: str) -> None:
        line = f"[dim]{_timestamp()}[/dim] {icon} {escape(message)}"
        self.stderr_console.print(line, highlight=False, soft_wrap=True)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("[blue]i[/blue]", message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("[green]✓[/green]", message)

    def error(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("[red]✗[/red]", message)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message, highlight=False, soft_wrap=True)

    def text_output(self, text: str, **kwargs) -> None:  # noqa: ARG002
        # Paths may contain [brackets]; print without markup or highlighting
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        print(text, end="")

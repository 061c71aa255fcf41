"""
Terminal presenter.

Plain text on stdout for results and on stderr for diagnostics. ANSI
styling is only applied when stdout is a terminal.
"""

import sys

from ..core.interfaces.presenter import IPresenter

_BOLD = "1"
_RED = "91"
_YELLOW = "93"

# Gap between table columns.
_COLUMN_GAP = "  "


class ConsolePresenter(IPresenter):
    """Writes command output for a human reader."""

    def __init__(self, use_color: bool = True, file=None) -> None:
        self._out = file or sys.stdout
        self._err = sys.stderr
        self._styled = use_color and self._out.isatty()

    def _style(self, text: str, code: str) -> str:
        if not self._styled:
            return text
        return f"\033[{code}m{text}\033[0m"

    def print(self, message: str) -> None:
        print(message, file=self._out)

    def print_error(self, message: str) -> None:
        print(self._style(f"Error: {message}", _RED), file=self._err)

    def print_warning(self, message: str) -> None:
        print(self._style(f"Warning: {message}", _YELLOW), file=self._err)

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print rows as left-aligned columns under a header and a rule.

        Each column is as wide as its widest cell. Cells beyond the header
        count are printed unpadded. Nothing is printed for an empty table.
        """
        if not rows:
            return

        widths = [
            max([len(header)] + [len(str(row[i])) for row in rows if i < len(row)])
            for i, header in enumerate(headers)
        ]

        def render(cells: list[str]) -> str:
            padded = [
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(cells)
            ]
            return _COLUMN_GAP.join(padded)

        header_line = render(headers)
        print(self._style(header_line, _BOLD), file=self._out)
        print("-" * len(header_line), file=self._out)
        for row in rows:
            print(render(row).rstrip(), file=self._out)

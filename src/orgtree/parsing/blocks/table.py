"""Table parsing for the orgtree parser.

Handles ``| a | b |`` rows and ``|---+---|`` separators.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from orgtree.nodes import Table, TableCell, TableRow
from orgtree.tokens import TokenType


class TableParsingMixin:
    """Mixin for table parsing.

    Required Host Attributes:
        - _options: dict[str, Any]

    Required Host Methods:
        - _peek() -> LineToken | None
        - _advance() -> LineToken | None
        - _expect(types, what) -> LineToken
        - _parse_nested_content(text, lineno) -> tuple[Node, ...]

    """

    _options: dict[str, Any]

    def _parse_table(self) -> Table:
        """Parse a run of table rows and separators.

        With the ``multilineCell`` option set and a table that opens with a
        separator, consecutive rows between separators merge into one
        logical row. If the table contains any separator, the first row's
        cells are header cells.
        """
        first = self._peek()
        assert first is not None and first.is_table_element
        multiline = first.type is TokenType.TABLE_SEPARATOR and bool(
            self._options.get("multilineCell")
        )

        rows: list[TableRow] = []
        saw_separator = False
        while (token := self._peek()) is not None and token.is_table_element:
            if token.type is TokenType.TABLE_SEPARATOR:
                saw_separator = True
                self._advance()
            else:
                rows.append(self._parse_table_row(multiline))

        if saw_separator and rows:
            header = rows[0]
            rows[0] = replace(
                header,
                children=tuple(replace(cell, is_header=True) for cell in header.children),
            )

        return Table(children=tuple(rows), lineno=first.lineno)

    def _parse_table_row(self, multiline: bool) -> TableRow:
        first = self._expect({TokenType.TABLE_ROW}, "table row")
        cell_texts = _split_cells(first.content)

        while multiline and (token := self._peek()) is not None:
            if token.type is not TokenType.TABLE_ROW:
                break
            self._advance()
            # A cell first seen on a later row starts on that row's line.
            row_offset = token.lineno - first.lineno
            for index, text in enumerate(_split_cells(token.content)):
                if index < len(cell_texts):
                    cell_texts[index] = f"{cell_texts[index]}\n{text}"
                else:
                    cell_texts.append("\n" * row_offset + text)

        cells = tuple(
            TableCell(children=self._parse_nested_content(text, first.lineno), lineno=first.lineno)
            for text in cell_texts
        )
        return TableRow(children=cells, lineno=first.lineno)


def _split_cells(content: str) -> list[str]:
    """Split row content on ``|`` and strip the padding around each cell."""
    return [cell.strip() for cell in content.split("|")]

# src/fontbrowser/app_logic/rows.py

"""
Pure functions that turn the browser's state into table rows.

Nothing in this module touches Qt, so the row set can be checked without a
running application. The controller calls build_rows() on every refresh and
the table view uses sort_rows() and paginate() to decide what to draw.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

DEFAULT_SAMPLE_TEXT = "Use 'Sample Text...' to change this preview"

# Script filter value meaning "all installed families"
NO_SCRIPT = "none"

FONT_COLUMN = 0
TEXT_COLUMN = 1
COLUMN_HEADERS = ("Font", "Text")


@dataclass(frozen=True)
class FontRow:
    """One table row: a family name and the sample text drawn in that family."""
    family: str
    sample: str


@dataclass
class PanelState:
    """The two session variables of the font browser."""
    sample_text: str = DEFAULT_SAMPLE_TEXT
    script: Optional[str] = None


def dedupe_families(names: Iterable[str]) -> List[str]:
    """Removes repeated family names, keeping the first occurrence of each."""
    return list(dict.fromkeys(names))


def build_rows(state: PanelState, font_source) -> List[FontRow]:
    """
    Derives the complete row set for the given state.

    Args:
        state: Current sample text and script filter.
        font_source: Any object with a `families(script)` method.

    Returns:
        One FontRow per distinct family, in enumeration order. An empty font
        list gives an empty row set.
    """
    families = dedupe_families(font_source.families(state.script))
    return [FontRow(family=family, sample=state.sample_text) for family in families]


def sort_rows(rows: Iterable[FontRow], column: int = FONT_COLUMN, descending: bool = False) -> List[FontRow]:
    """Sorts rows case-insensitively on the font or text column."""
    if column == TEXT_COLUMN:
        key = lambda row: (row.sample.casefold(), row.family.casefold())
    else:
        key = lambda row: row.family.casefold()
    return sorted(rows, key=key, reverse=descending)


def paginate(rows: List[FontRow], page: int, page_size: int) -> Tuple[List[FontRow], int, int]:
    """
    Cuts one page out of the row list.

    Args:
        rows: The full, already sorted row list.
        page: Zero-based page index. Clamped to the valid range.
        page_size: Rows per page. Zero or less shows everything on one page.

    Returns:
        (rows on the page, the clamped page index, total page count)
    """
    if page_size <= 0:
        return list(rows), 0, 1

    page_count = max(1, -(-len(rows) // page_size))
    page = min(max(page, 0), page_count - 1)
    start = page * page_size
    return rows[start:start + page_size], page, page_count

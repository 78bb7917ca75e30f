# src/fontbrowser/ui/font_table.py

"""
Defines the sortable, paginated table the font browser draws into.

This module contains the FontTable class, a PyQt6 QWidget wrapping a read-only
QTableView. It holds the full row set handed to it by the controller, sorts it
when a header is clicked, and shows one page at a time. The family name is
stored on every item so the highlighted row can be resolved back to a font.
"""

import logging
import sys
from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeySequence, QShortcut, QStandardItem, QStandardItemModel
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from fontbrowser.app_logic.rows import (
    COLUMN_HEADERS,
    FONT_COLUMN,
    FontRow,
    paginate,
    sort_rows,
)

logger = logging.getLogger(__name__)

FAMILY_ROLE = Qt.ItemDataRole.UserRole


class FontTable(QWidget):
    """
    A two-column font list: family name, and a preview drawn in that family.

    Signals:
        row_activated (str): Emitted with the family name when a row is
            double-clicked.
    """
    row_activated = pyqtSignal(str)

    def __init__(
        self,
        page_size: int = 50,
        preview_point_size: int = 14,
        refresh_shortcut: str = "F5",
        parent: QWidget = None,
    ):
        """
        Args:
            page_size (int): Rows per page. Zero or less disables paging.
            preview_point_size (int): Point size of the preview column.
            refresh_shortcut (str): Key sequence that triggers the refresh hook.
            parent (QWidget, optional): The parent widget.
        """
        super().__init__(parent)

        # --- State Variables ---
        self._rows: List[FontRow] = []
        self._headers: Sequence[str] = COLUMN_HEADERS
        self._sort_column = FONT_COLUMN
        self._descending = False
        self._page = 0
        self._page_count = 1
        self._page_size = page_size
        self._preview_point_size = preview_point_size
        self._refresh_hook: Optional[Callable[[], None]] = None

        self._init_ui()

        refresh = QShortcut(QKeySequence(refresh_shortcut), self)
        refresh.setContext(Qt.ShortcutContext.WidgetWithChildrenShortcut)
        refresh.activated.connect(self.request_refresh)

    def _init_ui(self):
        """Creates the table and the paging bar below it."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.model = QStandardItemModel(0, len(self._headers), self)
        self.model.setHorizontalHeaderLabels(list(self._headers))

        self.view = QTableView()
        self.view.setModel(self.model)
        self.view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.view.verticalHeader().setVisible(False)
        self.view.doubleClicked.connect(self._on_double_clicked)

        header = self.view.horizontalHeader()
        header.setSectionsClickable(True)
        header.setSortIndicatorShown(True)
        header.setSortIndicator(self._sort_column, self._sort_order())
        header.setSectionResizeMode(FONT_COLUMN, QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.sectionClicked.connect(self._on_header_clicked)
        layout.addWidget(self.view)

        # --- Paging bar ---
        paging = QHBoxLayout()
        self.prev_button = QPushButton("< Previous")
        self.prev_button.clicked.connect(self.previous_page)
        self.next_button = QPushButton("Next >")
        self.next_button.clicked.connect(self.next_page)
        self.page_label = QLabel()
        self.page_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        paging.addWidget(self.prev_button)
        paging.addWidget(self.page_label, 1)
        paging.addWidget(self.next_button)
        layout.addLayout(paging)

        self.setLayout(layout)
        self._update_paging_bar()

    def _sort_order(self) -> Qt.SortOrder:
        if self._descending:
            return Qt.SortOrder.DescendingOrder
        return Qt.SortOrder.AscendingOrder

    # --- Surface interface used by the controller ---

    def set_columns(self, headers: Sequence[str]):
        self._headers = tuple(headers)
        self.model.setColumnCount(len(self._headers))
        self.model.setHorizontalHeaderLabels(list(self._headers))

    def set_sort(self, column: int, descending: bool = False):
        self._sort_column = column
        self._descending = descending
        self._page = 0
        self.view.horizontalHeader().setSortIndicator(column, self._sort_order())

    def set_refresh_hook(self, hook: Callable[[], None]):
        self._refresh_hook = hook

    def set_rows(self, rows: List[FontRow]):
        self._rows = list(rows)

    def redraw(self):
        """Re-sorts the full row set and fills the model with the current page."""
        ordered = sort_rows(self._rows, self._sort_column, self._descending)
        page_rows, self._page, self._page_count = paginate(ordered, self._page, self._page_size)

        if self.model.rowCount():
            self.model.removeRows(0, self.model.rowCount())

        for row in page_rows:
            name_item = QStandardItem(row.family)
            name_item.setData(row.family, FAMILY_ROLE)

            sample_item = QStandardItem(row.sample)
            sample_item.setData(row.family, FAMILY_ROLE)
            sample_item.setFont(QFont(row.family, self._preview_point_size))
            sample_item.setToolTip(row.family)

            self.model.appendRow([name_item, sample_item])

        self._update_paging_bar()

    def current_family(self) -> Optional[str]:
        """The family on the highlighted row, or None when nothing is highlighted."""
        index = self.view.currentIndex()
        if not index.isValid():
            return None
        return index.siblingAtColumn(FONT_COLUMN).data(FAMILY_ROLE)

    def focus(self):
        self.view.setFocus(Qt.FocusReason.OtherFocusReason)

    # --- Helpers ---

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def total_rows(self) -> int:
        return len(self._rows)

    @property
    def sort_column(self) -> int:
        return self._sort_column

    @property
    def descending(self) -> bool:
        return self._descending

    def displayed_families(self) -> List[str]:
        """Family names on the page currently shown, top to bottom."""
        return [
            self.model.item(row, FONT_COLUMN).data(FAMILY_ROLE)
            for row in range(self.model.rowCount())
        ]

    def select_family(self, family: str) -> bool:
        """Highlights the row for `family` if it is on the current page."""
        for row in range(self.model.rowCount()):
            if self.model.item(row, FONT_COLUMN).data(FAMILY_ROLE) == family:
                self.view.setCurrentIndex(self.model.index(row, FONT_COLUMN))
                return True
        return False

    def request_refresh(self):
        """Asks the owner to rebuild the rows; redraws as-is when no hook is set."""
        if self._refresh_hook is not None:
            self._refresh_hook()
        else:
            self.redraw()

    def next_page(self):
        if self._page + 1 < self._page_count:
            self._page += 1
            self.redraw()

    def previous_page(self):
        if self._page > 0:
            self._page -= 1
            self.redraw()

    def _update_paging_bar(self):
        self.page_label.setText(f"Page {self._page + 1}/{self._page_count} ({len(self._rows)} fonts)")
        self.prev_button.setEnabled(self._page > 0)
        self.next_button.setEnabled(self._page + 1 < self._page_count)

    # --- Slots ---

    def _on_header_clicked(self, column: int):
        """Sorts by the clicked column; a second click on it flips the order."""
        if column == self._sort_column:
            self.set_sort(column, not self._descending)
        else:
            self.set_sort(column, False)
        logger.debug(f"Sorting font table by column {column}, descending={self._descending}")
        self.redraw()

    def _on_double_clicked(self, index):
        family = index.siblingAtColumn(FONT_COLUMN).data(FAMILY_ROLE)
        if family:
            self.row_activated.emit(family)


if __name__ == '__main__':
    # Standalone check of the table with a few made-up rows.
    app = QApplication(sys.argv)

    table = FontTable(page_size=3)
    table.set_rows([FontRow(name, "The quick brown fox") for name in ("Serif", "Sans", "Monospace", "Cursive")])
    table.redraw()
    table.resize(600, 300)
    table.show()

    sys.exit(app.exec())

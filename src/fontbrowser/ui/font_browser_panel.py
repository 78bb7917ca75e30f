# src/fontbrowser/ui/font_browser_panel.py

"""
Defines the font browser panel window.

This module contains the FontBrowserPanel class: a tool window that combines a
small command bar with a FontTable and owns the FontBrowserController driving
it. The panel supplies the interactive parts the controller leaves out, such as
the sample-text and script prompts and the yes/no confirmation before a font
is applied.
"""

import logging
import sys
from typing import Callable, Dict, List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from fontbrowser.app_logic.panel_controller import FontBrowserController
from fontbrowser.app_logic.rows import NO_SCRIPT
from fontbrowser.fonts.font_source import (
    QtFontSource,
    ScriptInfo,
    script_choices,
    script_registry,
)
from fontbrowser.ui.font_table import FontTable
from fontbrowser.utils.config import ConfigManager, get_config

logger = logging.getLogger(__name__)


class FontBrowserPanel(QWidget):
    """
    Tool window listing the installed font families.

    The window deletes itself when closed; `closed` is emitted first so the
    owner can drop its reference, and the controller is deactivated.
    """
    closed = pyqtSignal()

    def __init__(
        self,
        set_display_font: Callable[[str], None],
        font_source=None,
        config: Optional[ConfigManager] = None,
        parent: QWidget = None,
    ):
        """
        Args:
            set_display_font: Applies a family as the editor's display font.
            font_source: Font enumeration; the installed Qt fonts by default.
            config (ConfigManager, optional): Settings; the shared instance by default.
            parent (QWidget, optional): Owning window.
        """
        super().__init__(parent)
        self._config = config if config is not None else get_config()
        self._font_source = font_source if font_source is not None else QtFontSource()
        self._scripts: Dict[str, ScriptInfo] = script_registry()

        self.table = FontTable(
            page_size=self._config.get_int("page_size"),
            preview_point_size=self._config.get_int("preview_point_size"),
            refresh_shortcut=self._config.get("refresh_shortcut", "F5"),
        )
        self.controller = FontBrowserController(
            self._font_source,
            set_display_font,
            self.confirm,
            known_scripts=self._scripts,
        )

        self._init_window_properties()
        self._init_ui()

    def _init_window_properties(self):
        self.setWindowTitle("Font Browser")
        self.setWindowFlags(Qt.WindowType.Window)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.resize(720, 520)

    def _init_ui(self):
        """Creates the command bar above the font table."""
        layout = QVBoxLayout()

        commands = QHBoxLayout()
        self.sample_button = QPushButton("Sample Text...")
        self.sample_button.clicked.connect(self.prompt_sample_text)
        self.script_button = QPushButton("Script...")
        self.script_button.clicked.connect(self.prompt_script_filter)
        self.apply_button = QPushButton("Apply Font")
        self.apply_button.clicked.connect(self.apply_font)
        self.copy_button = QPushButton("Copy Name")
        self.copy_button.clicked.connect(self.copy_name)
        for button in (self.sample_button, self.script_button, self.apply_button, self.copy_button):
            commands.addWidget(button)
        commands.addStretch(1)

        self.status_label = QLabel()
        commands.addWidget(self.status_label)
        layout.addLayout(commands)

        self.table.row_activated.connect(lambda _family: self.apply_font())
        layout.addWidget(self.table)

        self.setLayout(layout)
        self._update_status()

    def _update_status(self):
        script = self.controller.state.script
        if script is None:
            self.status_label.setText("Script: all")
        else:
            self.status_label.setText(f"Script: {script}")

    # --- Lifecycle ---

    def open(self):
        """Shows the panel and builds the font list; reopening only refocuses."""
        self.controller.activate(self.table)
        self._update_status()
        self.show()
        self.raise_()
        self.activateWindow()

    def closeEvent(self, event):
        self.controller.deactivate()
        self.closed.emit()
        super().closeEvent(event)

    # --- Commands ---

    def script_labels(self) -> List[str]:
        """Prompt entries: 'none' first, then one label per script."""
        return [
            choice if choice == NO_SCRIPT else self._scripts[choice].label
            for choice in script_choices()
        ]

    def _script_for_label(self, label: str) -> Optional[str]:
        for identifier, info in self._scripts.items():
            if info.label == label:
                return identifier
        return None

    def prompt_sample_text(self):
        """Asks for a new preview string. Cancel leaves the current one in place."""
        text, ok = QInputDialog.getText(
            self,
            "Sample Text",
            "Text to preview (leave empty for the default):",
            QLineEdit.EchoMode.Normal,
            self.controller.state.sample_text,
        )
        if ok:
            self.controller.set_sample_text(text)

    def prompt_script_filter(self):
        """Offers the known scripts in a non-editable list, plus 'none'."""
        labels = self.script_labels()
        current = self.controller.state.script
        current_index = 0
        if current in self._scripts:
            current_index = labels.index(self._scripts[current].label)

        label, ok = QInputDialog.getItem(
            self,
            "Script",
            "Show fonts supporting:",
            labels,
            current_index,
            False,
        )
        if not ok:
            return
        if label == NO_SCRIPT:
            self.controller.set_script_filter(NO_SCRIPT)
        else:
            script = self._script_for_label(label)
            if script is None:
                logger.warning(f"Script prompt returned an unknown entry: {label!r}")
                return
            self.controller.set_script_filter(script)
        self._update_status()

    def confirm(self, question: str) -> bool:
        reply = QMessageBox.question(
            self,
            "Apply Font",
            question,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def apply_font(self) -> bool:
        return self.controller.apply_font_from_current_row()

    def copy_name(self) -> Optional[str]:
        return self.controller.copy_current_family()


if __name__ == '__main__':
    # Standalone check: browse the installed fonts and print the chosen one.
    app = QApplication(sys.argv)

    panel = FontBrowserPanel(set_display_font=lambda family: print(f"Display font: {family}"))
    panel.open()

    sys.exit(app.exec())

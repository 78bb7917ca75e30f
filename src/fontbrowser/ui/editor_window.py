# src/fontbrowser/ui/editor_window.py

"""
Implements the editor window that hosts the font browser.

This module provides the EditorWindow class, a QMainWindow around a plain-text
editing area. Its display font is what the font browser changes, and its
"Fonts" menu opens the browser and forwards the browser commands to it while
it is open.
"""

import logging
from typing import Optional

from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QPlainTextEdit, QWidget

from fontbrowser.ui.font_browser_panel import FontBrowserPanel
from fontbrowser.utils.config import ConfigManager, get_config

logger = logging.getLogger(__name__)


class EditorWindow(QMainWindow):
    """
    A minimal text editor whose display font can be chosen from the font browser.

    The display font lasts for the running session only.
    """

    def __init__(self, config: Optional[ConfigManager] = None, font_source=None, parent: QWidget = None):
        """
        Args:
            config (ConfigManager, optional): Settings; the shared instance by default.
            font_source: Font enumeration handed to the browser panel.
            parent (QWidget, optional): The parent widget.
        """
        super().__init__(parent)
        self._config = config if config is not None else get_config()
        self._font_source = font_source
        self._font_panel: Optional[FontBrowserPanel] = None

        self.setWindowTitle("FontBrowser")
        self.resize(900, 600)

        self.editor = QPlainTextEdit()
        font = QFont(self.editor.font())
        font.setPointSize(self._config.get_int("editor_point_size"))
        self.editor.setFont(font)
        self.setCentralWidget(self.editor)

        self._create_actions()

    def _create_actions(self):
        """
        Creates the Fonts menu and connects its actions.
        """
        menu = self.menuBar().addMenu("&Fonts")

        browse_action = QAction("Browse Fonts", self)
        browse_action.setShortcut(QKeySequence(self._config.get("browse_shortcut", "Ctrl+Alt+F")))
        browse_action.triggered.connect(self.browse_fonts)

        sample_action = QAction("Set Sample Text...", self)
        sample_action.triggered.connect(self.set_sample_text)

        script_action = QAction("Set Script Filter...", self)
        script_action.triggered.connect(self.set_script_filter)

        apply_action = QAction("Apply Font From Row", self)
        apply_action.triggered.connect(self.apply_font_from_row)

        menu.addAction(browse_action)
        menu.addSeparator()
        menu.addAction(sample_action)
        menu.addAction(script_action)
        menu.addAction(apply_action)

    # --- Display font ---

    def set_display_font(self, family: str):
        """Switches the editing area to `family`, keeping its point size."""
        font = QFont(self.editor.font())
        font.setFamily(family)
        self.editor.setFont(font)
        logger.info(f"Editor display font is now '{family}' ({font.pointSize()}pt).")

    def display_font_family(self) -> str:
        return self.editor.font().family()

    # --- Font browser ---

    @property
    def font_panel(self) -> Optional[FontBrowserPanel]:
        return self._font_panel

    def browse_fonts(self) -> FontBrowserPanel:
        """Opens the font browser, reusing the window if it is already open."""
        if self._font_panel is None:
            self._font_panel = FontBrowserPanel(
                self.set_display_font,
                font_source=self._font_source,
                config=self._config,
                parent=self,
            )
            self._font_panel.closed.connect(self._on_panel_closed)
        self._font_panel.open()
        return self._font_panel

    def _on_panel_closed(self):
        self._font_panel = None

    def _open_panel(self, command: str) -> Optional[FontBrowserPanel]:
        if self._font_panel is None:
            logger.debug(f"Ignoring '{command}': font browser is not open.")
        return self._font_panel

    def set_sample_text(self):
        panel = self._open_panel("set sample text")
        if panel is not None:
            panel.prompt_sample_text()

    def set_script_filter(self):
        panel = self._open_panel("set script filter")
        if panel is not None:
            panel.prompt_script_filter()

    def apply_font_from_row(self):
        panel = self._open_panel("apply font")
        if panel is not None:
            panel.apply_font()

    def closeEvent(self, event):
        if self._font_panel is not None:
            self._font_panel.close()
        super().closeEvent(event)

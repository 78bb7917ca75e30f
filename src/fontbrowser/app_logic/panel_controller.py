# src/fontbrowser/app_logic/panel_controller.py

"""
Defines the font browser's controller and its two-state lifecycle.

The controller owns the session state (sample text and script filter) and
drives a list-view surface: it configures the columns, installs itself as the
surface's refresh hook, rebuilds the row set whenever something changes, and
applies the highlighted family as the editor's display font once the user
confirms. It knows nothing about Qt; the surface, the font source, the
confirmation prompt and the display-font setter are all handed in.
"""

import logging
from enum import Enum, auto
from typing import Callable, Iterable, List, Optional, Protocol

from fontbrowser.app_logic.rows import (
    COLUMN_HEADERS,
    DEFAULT_SAMPLE_TEXT,
    FONT_COLUMN,
    FontRow,
    NO_SCRIPT,
    PanelState,
    build_rows,
)
from fontbrowser.utils.clipboard import copy_to_clipboard

# Configure logging for this module
logger = logging.getLogger(__name__)


class PanelStatus(Enum):
    """Enumeration for the browser's possible states."""
    INACTIVE = auto()
    ACTIVE = auto()


class ListView(Protocol):
    """The table surface the controller renders into."""

    def set_columns(self, headers) -> None: ...

    def set_sort(self, column: int, descending: bool = False) -> None: ...

    def set_refresh_hook(self, hook: Callable[[], None]) -> None: ...

    def set_rows(self, rows: List[FontRow]) -> None: ...

    def redraw(self) -> None: ...

    def current_family(self) -> Optional[str]: ...

    def focus(self) -> None: ...


class FontBrowserController:
    """
    Owns the browser state and keeps the list view in step with it.

    Commands issued while the controller is INACTIVE are ignored.
    """

    def __init__(
        self,
        font_source,
        set_display_font: Callable[[str], None],
        confirm: Callable[[str], bool],
        known_scripts: Optional[Iterable[str]] = None,
    ):
        """
        Args:
            font_source: Object with a `families(script)` method.
            set_display_font: Called with a family name to make it the
                editor's display font for the session.
            confirm: Asks a yes/no question, returns True on yes.
            known_scripts: Valid script identifiers. When omitted, validation
                is left to the font source.
        """
        self._font_source = font_source
        self._set_display_font = set_display_font
        self._confirm = confirm
        self._known_scripts = set(known_scripts) if known_scripts is not None else None

        self._status = PanelStatus.INACTIVE
        self._view: Optional[ListView] = None
        self.state = PanelState()
        self.rows: List[FontRow] = []

    @property
    def status(self) -> PanelStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status is PanelStatus.ACTIVE

    @property
    def view(self) -> Optional[ListView]:
        return self._view

    def _set_status(self, new_status: PanelStatus):
        """Sets and logs the controller status."""
        if self._status != new_status:
            logger.info(f"Font browser: {self._status.name} -> {new_status.name}")
            self._status = new_status

    def _ignore(self, command: str) -> bool:
        if self.is_active:
            return False
        logger.debug(f"Ignoring '{command}': font browser is not open.")
        return True

    # --- Lifecycle ---

    def activate(self, view: ListView) -> ListView:
        """
        Opens the browser on `view`, or refocuses the surface already in use.

        Returns:
            The surface that is now showing the font list.
        """
        if self.is_active and self._view is not None:
            self._view.focus()
            return self._view

        self._view = view
        view.set_columns(COLUMN_HEADERS)
        view.set_sort(FONT_COLUMN, descending=False)
        view.set_refresh_hook(self.refresh)
        self._set_status(PanelStatus.ACTIVE)

        self.refresh()
        view.focus()
        return view

    def deactivate(self):
        """Called when the surface goes away."""
        self._view = None
        self.rows = []
        self._set_status(PanelStatus.INACTIVE)

    # --- Refresh ---

    def refresh(self):
        """Rebuilds every row from the current state and redraws the surface."""
        if self._ignore("refresh"):
            return
        self.rows = build_rows(self.state, self._font_source)
        logger.info(f"Font browser refreshed: {len(self.rows)} families (script={self.state.script or NO_SCRIPT}).")
        self._view.set_rows(self.rows)
        self._view.redraw()

    # --- Commands ---

    def set_sample_text(self, text: str):
        """Adopts `text` as the preview string. An empty string restores the default."""
        if self._ignore("set sample text"):
            return
        self.state.sample_text = text if text else DEFAULT_SAMPLE_TEXT
        self.refresh()

    def set_script_filter(self, script: Optional[str]):
        """
        Narrows the list to families supporting `script`.

        Args:
            script: A script identifier, or None / 'none' to show every family.

        Raises:
            ValueError: If `script` is not a known identifier.
        """
        if self._ignore("set script filter"):
            return
        if script is None or script == NO_SCRIPT:
            self.state.script = None
        else:
            if self._known_scripts is not None and script not in self._known_scripts:
                raise ValueError(f"Unknown script identifier: {script!r}")
            self.state.script = script
        self.refresh()

    def apply_font_from_current_row(self) -> bool:
        """
        Makes the highlighted family the display font after a yes/no prompt.

        Returns:
            True if the display font was changed.
        """
        if self._ignore("apply font"):
            return False
        family = self._view.current_family()
        if not family:
            logger.debug("Apply font requested with no row selected.")
            return False

        if not self._confirm(f"Set display font to {family}?"):
            logger.info(f"Display font change to '{family}' cancelled.")
            return False

        self._set_display_font(family)
        logger.info(f"Display font set to '{family}'.")
        return True

    def copy_current_family(self) -> Optional[str]:
        """Copies the highlighted family name to the clipboard."""
        if self._ignore("copy font name"):
            return None
        family = self._view.current_family()
        if not family:
            return None
        return family if copy_to_clipboard(family) else None

# src/fontbrowser/fonts/font_source.py

"""
Font enumeration and the script (writing system) registry.

Everything here is a thin layer over Qt's QFontDatabase. The FontSource
protocol is what the panel controller depends on, so tests can hand it an
in-memory list of families instead of the fonts installed on the machine.

A QGuiApplication must exist before QFontDatabase is queried.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from PyQt6.QtGui import QFontDatabase

from fontbrowser.app_logic.rows import NO_SCRIPT

logger = logging.getLogger(__name__)

# QFontDatabase.WritingSystem members that are not real scripts
_SKIPPED_WRITING_SYSTEMS = {"Any", "WritingSystemsCount"}


@dataclass(frozen=True)
class ScriptInfo:
    """A writing system the font list can be narrowed to."""
    identifier: str
    writing_system: QFontDatabase.WritingSystem
    display_name: str
    sample: str

    @property
    def label(self) -> str:
        """Prompt label, e.g. 'greek (Ελληνικά)'."""
        if self.sample:
            return f"{self.identifier} ({self.sample})"
        return self.identifier


class FontSource(Protocol):
    """Anything that can list font family names, optionally for one script."""

    def families(self, script: Optional[str] = None) -> List[str]:
        ...


def script_registry() -> Dict[str, ScriptInfo]:
    """
    Builds the mapping of script identifiers to their Qt writing system.

    Identifiers are the lower-cased WritingSystem names ('greek', 'tamil',
    'simplifiedchinese', ...), in Qt's declaration order.
    """
    registry: Dict[str, ScriptInfo] = {}
    for writing_system in QFontDatabase.WritingSystem:
        if writing_system.name in _SKIPPED_WRITING_SYSTEMS:
            continue
        identifier = writing_system.name.lower()
        registry[identifier] = ScriptInfo(
            identifier=identifier,
            writing_system=writing_system,
            display_name=QFontDatabase.writingSystemName(writing_system),
            sample=QFontDatabase.writingSystemSample(writing_system),
        )
    return registry


def script_choices() -> List[str]:
    """The values offered by the script prompt: 'none' first, then every script."""
    return [NO_SCRIPT] + list(script_registry())


class QtFontSource:
    """
    FontSource backed by the fonts Qt can see on this system.

    The registry is read once per instance; the installed families are read on
    every call so a refresh picks up newly installed fonts.
    """

    def __init__(self):
        self._registry = script_registry()

    @property
    def registry(self) -> Dict[str, ScriptInfo]:
        return self._registry

    def families(self, script: Optional[str] = None) -> List[str]:
        """
        Lists installed font family names, possibly with repeats.

        Args:
            script: A registry identifier, or None / 'none' for every family.

        Raises:
            ValueError: If `script` is not a known identifier.
        """
        if script is None or script == NO_SCRIPT:
            names = QFontDatabase.families()
        else:
            info = self._registry.get(script)
            if info is None:
                raise ValueError(f"Unknown script identifier: {script!r}")
            names = QFontDatabase.families(info.writing_system)

        logger.debug(f"QFontDatabase reported {len(names)} families for script={script!r}")
        return list(names)

"""
pytest configuration: run Qt offscreen and share one QApplication per session.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from fontbrowser.utils.config import ConfigManager


class FakeFontSource:
    """In-memory font enumeration, with repeats, keyed by script identifier."""

    def __init__(self, families, by_script=None):
        self._families = list(families)
        self._by_script = dict(by_script or {})
        self.calls = []

    def families(self, script=None):
        self.calls.append(script)
        if script is None:
            return list(self._families)
        return list(self._by_script.get(script, []))


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(["fontbrowser-tests"])
    yield app


@pytest.fixture
def config(tmp_path):
    return ConfigManager(config_dir=tmp_path)


@pytest.fixture
def font_source():
    return FakeFontSource(
        ["DejaVu Sans", "Noto Sans Tamil", "DejaVu Sans", "Liberation Serif", "Noto Sans Tamil"],
        by_script={
            "tamil": ["Noto Sans Tamil", "Noto Sans Tamil"],
            "greek": ["DejaVu Sans", "Liberation Serif", "DejaVu Sans"],
        },
    )

# src/fontbrowser/__init__.py

"""
FontBrowser: A desktop panel for comparing installed fonts side by side.

This package contains a small PyQt6 editor window and a font browser panel
that lists every installed font family, renders a sample string in each, can
narrow the list to a single writing system, and applies the chosen family as
the editor's display font.
"""

__version__ = "0.1.0"
__author__ = "FontBrowser Developer"
__email__ = "developer@example.com"

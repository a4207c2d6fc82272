"""
Input Controllers
=================
Translate user input into state changes.

Note: This package should be pure Python and should NOT import PySide6.
"""

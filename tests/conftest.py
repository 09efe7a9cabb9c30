"""Shared fixtures for the termlinks test suite."""

from __future__ import annotations

import pytest
from PySide6 import QtCore

from termlinks.core.links import DetectedLink, LinkKind


@pytest.fixture(scope="session")
def qcore_app():
    """A QCoreApplication for tests that create QObjects."""
    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    return app


@pytest.fixture
def url_link():
    def make(text: str, row: int = 0, col: int = 0) -> DetectedLink:
        return DetectedLink(LinkKind.URL, (row, col), (row, col + len(text) - 1), text)

    return make


@pytest.fixture
def path_link():
    def make(text: str, row: int = 0, col: int = 0) -> DetectedLink:
        return DetectedLink(LinkKind.FILE_PATH, (row, col), (row, col + len(text) - 1), text)

    return make

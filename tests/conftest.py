import json
import os

import pytest

# Headless Qt for CI / terminals without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from demoui.services.resource_locator import DirectoryResourceLocator


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def resource_dir(tmp_path):
    """Empty directory used as the only search location."""
    return tmp_path


@pytest.fixture
def locator(resource_dir):
    return DirectoryResourceLocator(str(resource_dir))


@pytest.fixture
def write_items(resource_dir):
    """Write raw bytes (or a JSON-serialisable value) as demo_items.json."""
    def _write(content, name="demo_items.json"):
        path = resource_dir / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write

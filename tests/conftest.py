# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src/ to sys.path so `import egg` works without an install.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from egg.application.directory import RuntimeDirectory  # noqa: E402
from egg.infrastructure.dom import SoupDocument  # noqa: E402


PAGE = """
<html><body>
  <div id="counter" data-module="counter">
    <ul data-type="list">
      <li id="item" data-type="item"><span id="label">one</span></li>
    </ul>
    <button id="plain">reset</button>
  </div>
  <div id="shared" data-module="left right">
    <a id="link" data-type="link">go</a>
  </div>
</body></html>
"""


@pytest.fixture
def directory():
    d = RuntimeDirectory()
    yield d
    d.clear()


@pytest.fixture
def runtime(directory):
    return directory.create({"name": "app", "debug": False})


@pytest.fixture
def debug_runtime(directory):
    return directory.create({"name": "dev", "debug": True})


@pytest.fixture
def document():
    return SoupDocument(PAGE)


@pytest.fixture
def page_runtime(directory, document):
    return directory.create({"name": "page", "debug": False}, document=document)


@pytest.fixture
def errors(runtime):
    received = []
    runtime.event.listen("error", received.append)
    return received

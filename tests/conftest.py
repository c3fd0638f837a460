"""
Shared fixtures for fsquery tests.

Builds a small project tree in a temporary directory:

    projects/
        projectA/
            docs/readme.md
            src/index.html, src/index.js, src/style.css
            package.json
        projectB/
            docs/readme.md
            src/index.js
"""

import os
import pytest

from fsquery.tools.probe import NodeProbe


PROJECT_FILES = {
    "projectA/docs/readme.md": "# Project A Documentation",
    "projectA/src/index.html": "<html><body><h1>Hello World!</h1></body></html>",
    "projectA/src/index.js": 'console.log("Hello World!");',
    "projectA/src/style.css": "body { background-color: red; }",
    "projectA/package.json": '{ "name": "projectA", "version": "1.0.0" }',
    "projectB/src/index.js": 'console.log("Hello World!");',
    "projectB/docs/readme.md": "# Project B Documentation",
}


@pytest.fixture
def projects(tmp_path):
    """Absolute path of the populated ``projects`` folder."""
    root = tmp_path / "projects"
    for relative, content in PROJECT_FILES.items():
        file_path = root / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
    return os.path.abspath(str(root))


@pytest.fixture
def probe():
    """A fresh probe whose counters start at zero."""
    return NodeProbe()

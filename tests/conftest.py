"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from doctoc.render import BaseRenderer


class StubRenderer(BaseRenderer):
    """Deterministic renderer: wraps the body in <p> and keeps text as is."""

    def __init__(self):
        self.calls = 0

    def render_body(self, body: str) -> str:
        self.calls += 1
        return f"<p>{body.strip()}</p>"

    def render_plain_text(self, body: str) -> str:
        return body.strip()


SAMPLE_INDEX = """\
-: guide
-: empty
-: advanced

[guide]
-: intro
-: setup
-: upgrade

[advanced]
-: README
-: tuning

[pages]
-: faq
"""

SAMPLE_DOCS = {
    "en-US/guide/intro.md": "---\nname: Getting Started\n---\nWelcome to the guide. Install first.\n",
    "en-US/guide/setup.md": "---\nname: Setup\n---\nRun the installer and configure the server.\n",
    "en-US/guide/upgrade.md": "Upgrade notes: configure backups before you upgrade.\n",
    "en-US/advanced/README.md": "---\nname: Advanced\n---\n\n",
    "en-US/advanced/tuning.md": "Tuning the server cache.\n",
    "en-US/faq.md": "---\nname: FAQ\n---\nFrequently asked questions.\n",
    "zh-CN/guide/intro.md": "---\nname: 入门\n---\n欢迎阅读指南。\n",
    "zh-CN/faq.md": "---\nname: 常见问题\n---\n常见问题解答。\n",
}


def write_docs(root: Path, index: str = SAMPLE_INDEX, docs: dict = None) -> Path:
    """Write an index file and documents under root."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "TOC.ini").write_text(index, encoding="utf-8")
    for rel_path, text in (SAMPLE_DOCS if docs is None else docs).items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def stub_renderer():
    """Provide a deterministic renderer."""
    return StubRenderer()


@pytest.fixture
def docs_root(temp_dir):
    """Sample documentation tree in en-US (complete) and zh-CN (partial)."""
    return write_docs(temp_dir / "docs")


@pytest.fixture
def langs():
    """Configured languages, default first."""
    return ["en-US", "zh-CN"]


@pytest.fixture
def make_docs(temp_dir):
    """Factory writing a custom documentation tree under temp_dir."""
    def _make(index: str = SAMPLE_INDEX, docs: dict = None, name: str = "docs") -> Path:
        return write_docs(temp_dir / name, index=index, docs=docs)
    return _make

"""
TOC Node Component.

A node is one directory or file entry of a table of contents, or a standalone
page. It owns the rendered content of its backing Markdown document and a
lowercased plain-text projection used for search.
"""

import logging
import os
from typing import List, Optional, Tuple

from core.constants import FRONT_MATTER_MARKER, FRONT_MATTER_TITLE_KEY
from core.errors import DocReadError
from ..render import BaseRenderer

logger = logging.getLogger(__name__)


def parse_front_matter(name: str, data: str) -> Tuple[str, str]:
    """
    Split a document into its title and body.

    Args:
        name: Declared node name, used as the title unless front matter overrides it
        data: Full document text

    Returns:
        Tuple of (title, body)
    """
    data = data.strip()
    marker_len = len(FRONT_MATTER_MARKER)
    if len(data) < marker_len or not data.startswith(FRONT_MATTER_MARKER):
        return name, data

    end_idx = data.find(FRONT_MATTER_MARKER, marker_len)
    if end_idx == -1:
        # Unterminated front matter swallows the whole document
        return name, ""

    title = name
    for opt in data[marker_len:end_idx].strip().split("\n"):
        key, sep, value = opt.partition(":")
        if not sep:
            continue
        if key.strip() == FRONT_MATTER_TITLE_KEY and value.strip():
            title = value.strip()

    return title, data[end_idx + marker_len:]


class Node:
    """
    A single document or directory entry.

    With cache_rendered_content (production mode) the content is computed once
    by reload_content() at load time. Without it (development mode) every
    content() call re-reads the file so edits show up without a full reload.
    """

    def __init__(
        self,
        name: str,
        file_name: str,
        renderer: BaseRenderer,
        cache_rendered_content: bool = True,
        nodes: Optional[List["Node"]] = None
    ):
        """
        Initialize node.

        Args:
            name: Path segment, unique among siblings
            file_name: Full path of the backing document, with .md extension
            renderer: Renderer for body and plain text
            cache_rendered_content: Keep rendered content between calls
            nodes: Child nodes (directory nodes only)
        """
        self.name = name
        self.title = name
        self.file_name = file_name
        self.renderer = renderer
        self.cache_rendered_content = cache_rendered_content
        self.nodes: List[Node] = nodes if nodes is not None else []

        self.plain = False
        self.text = ""
        self._content: Optional[str] = None

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, title={self.title!r}, nodes={len(self.nodes)})"

    def exists(self) -> bool:
        """Whether the backing document is present on disk."""
        return os.path.isfile(self.file_name)

    def reload_content(self) -> None:
        """
        Read the backing document and recompute title, content and text.

        Raises:
            DocReadError: If the file cannot be read or is not valid UTF-8
        """
        try:
            with open(self.file_name, 'rb') as f:
                raw = f.read()
            data = raw.decode('utf-8')
        except OSError as e:
            raise DocReadError(self.file_name, str(e)) from e
        except UnicodeDecodeError as e:
            raise DocReadError(self.file_name, f"invalid UTF-8: {e}") from e

        self.title, body = parse_front_matter(self.name, data)
        self.plain = not body.strip()

        if self.plain:
            self._content = None
            self.text = ""
        else:
            self._content, text = self.renderer.render(body)
            self.text = text.lower()

    def content(self) -> Optional[str]:
        """
        Rendered content of the document body.

        Returns:
            Rendered content, or None for plain or not yet loaded nodes
        """
        if not self.cache_rendered_content:
            try:
                self.reload_content()
            except DocReadError as e:
                logger.error(f"Fail to reload content: {e}")

        return self._content

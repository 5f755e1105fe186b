"""
TOC Index Reader Component.

Reads the TOC.ini index that declares directories, their files and
standalone pages:

    -: intro
    -: advanced

    [intro]
    -: README
    -: installation

    [pages]
    -: donate

The leading section has no header. The '-' key may repeat and is numbered on
read, so declaration order is the only thing that matters.
"""

import configparser
import os
import re
from dataclasses import dataclass, field
from typing import Dict, List

from core.constants import AUTO_INCREMENT_KEY, PAGES_SECTION, ROOT_SECTION
from core.errors import TocIndexError


_AUTO_KEY_PATTERN = re.compile(re.escape(AUTO_INCREMENT_KEY) + r"\s*[=:]")


@dataclass
class TocIndex:
    """Ordered contents of a TOC index file."""
    dirs: List[str] = field(default_factory=list)
    files: Dict[str, List[str]] = field(default_factory=dict)
    pages: List[str] = field(default_factory=list)

    def files_of(self, dir_name: str) -> List[str]:
        """Files declared for a directory, empty when it has no section."""
        return self.files.get(dir_name, [])


class IndexReader:
    """
    Parses TOC index files with configparser.
    """

    @staticmethod
    def _expand_auto_keys(text: str) -> str:
        """Number every '-' key so repeated entries survive strict parsing."""
        lines = []
        counter = 0
        for line in text.splitlines():
            # Indentation carries no meaning in the index
            line = line.strip()
            if _AUTO_KEY_PATTERN.match(line):
                counter += 1
                line = f"{AUTO_INCREMENT_KEY}{counter}{line[len(AUTO_INCREMENT_KEY):]}"
            lines.append(line)
        return "\n".join(lines)

    @staticmethod
    def _values(section: configparser.SectionProxy) -> List[str]:
        return [value.strip() for value in section.values() if value.strip()]

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            delimiters=("=", ":"),
            inline_comment_prefixes=("#", ";"),
            default_section=f"{ROOT_SECTION}defaults",
            strict=True
        )
        # Keys keep their case
        parser.optionxform = str
        return parser

    @classmethod
    def parse(cls, text: str) -> TocIndex:
        """
        Parse index text.

        Args:
            text: Content of a TOC index file

        Returns:
            TocIndex with directories, files and pages in declaration order

        Raises:
            TocIndexError: If the text is not a valid index
        """
        parser = cls._new_parser()
        try:
            parser.read_string(f"[{ROOT_SECTION}]\n" + cls._expand_auto_keys(text))
        except configparser.Error as e:
            raise TocIndexError(f"Fail to parse TOC index: {e}") from e

        index = TocIndex()
        index.dirs = cls._values(parser[ROOT_SECTION])
        for dir_name in index.dirs:
            if parser.has_section(dir_name):
                index.files[dir_name] = cls._values(parser[dir_name])
        if parser.has_section(PAGES_SECTION):
            index.pages = cls._values(parser[PAGES_SECTION])
        return index

    @classmethod
    def read(cls, path: str) -> TocIndex:
        """
        Read and parse an index file.

        Args:
            path: Path to the index file

        Returns:
            Parsed TocIndex

        Raises:
            TocIndexError: If the file is missing, unreadable or malformed
        """
        if not os.path.isfile(path):
            raise TocIndexError(f"TOC not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TocIndexError(f"Fail to load {os.path.basename(path)}: {e}") from e

        return cls.parse(text)

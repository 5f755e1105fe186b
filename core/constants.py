"""
Constants and configuration values for the documentation TOC.
"""

# Front matter block delimiter
FRONT_MATTER_MARKER = '---'

# Front matter key that overrides a node title
FRONT_MATTER_TITLE_KEY = 'name'

# Extension of every backing document
DOC_EXTENSION = '.md'

# Default index file name at the documentation root
DEFAULT_INDEX_FILE = 'TOC.ini'

# Index section listing standalone pages
PAGES_SECTION = 'pages'

# Placeholder section name for the unnamed leading index section
ROOT_SECTION = '__toc_root__'

# Index key that is replaced by an increasing number on read
AUTO_INCREMENT_KEY = '-'

# Search snippet window around the first match
SNIPPET_CHARS_BEFORE = 20
SNIPPET_CHARS_AFTER = 230

# Local checkout used for remote sources
DEFAULT_CACHE_DIR = 'data/docs'

# Supported documentation source types
SOURCE_TYPES = ['local', 'remote']

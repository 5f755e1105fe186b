#!/usr/bin/env python3
"""
CLI workflow runner for the documentation TOC.

Provides command-line interface for loading, browsing and searching docs.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from api.dependencies import get_docs_service, get_settings
from core.errors import DocsError
from serving.docs_service import DocsService


def reload_cli(service: DocsService) -> bool:
    """Reload documentation and print a summary."""
    try:
        summary = service.reload_docs()
    except DocsError as e:
        print(f"❌ Fail to load docs: {e}")
        return False

    print(f"✓ Docs loaded: {', '.join(summary.langs)}")
    print(f"  Directories: {summary.dir_count}")
    print(f"  Files: {summary.file_count}")
    print(f"  Pages: {summary.page_count}")
    return True


def show_toc_cli(service: DocsService, lang: str):
    """Print the table of contents of a language."""
    toc = service.list_toc(lang)
    if toc is None:
        print(f"❌ Language not found: {lang}")
        return

    print("=" * 60)
    print(f"TOC ({toc.lang})")
    print("=" * 60)
    for dir_entry in toc.dirs:
        print(f"{dir_entry.name}/  [{dir_entry.title}]")
        for file_entry in dir_entry.files:
            print(f"{' ' * len(dir_entry.name)}|__ {file_entry.name}  [{file_entry.title}]")

    if toc.pages:
        print()
        print("Pages:")
        for page in toc.pages:
            print(f"  {page.name}  [{page.title}]")


def get_doc_cli(service: DocsService, lang: str, path: str):
    """Print a rendered document."""
    doc = service.get_doc(lang, path)
    if doc is None:
        print(f"❌ Document not found: {path or '(default)'}")
        return

    print(f"# {doc.title}")
    if doc.is_fallback:
        print(f"(not translated to {lang}, showing default language)")
    print()
    print(doc.content or "")


def get_page_cli(service: DocsService, lang: str, name: str):
    """Print a rendered standalone page."""
    page = service.get_page(lang, name)
    if page is None:
        print(f"❌ Page not found: {name}")
        return

    print(f"# {page.title}")
    print()
    print(page.content or "")


def search_cli(service: DocsService, lang: str, query: str):
    """Print search results."""
    response = service.search(lang, query)
    if not response.results:
        print(f"No results for: {query}")
        return

    print(f"Results for '{query}' ({len(response.results)}):")
    for result in response.results:
        print()
        print(f"- {result.title} ({result.path})")
        print(f"  ...{result.match.strip()}...")


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description='Multi-language documentation TOC CLI'
    )
    parser.add_argument('--lang', type=str, default=settings.langs[0], help='Language code')
    parser.add_argument('--log-level', type=str, default=settings.log_level, help='Logging level')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Reload command
    subparsers.add_parser('reload', help='Sync and load documentation')

    # Show TOC command
    subparsers.add_parser('show-toc', help='Show table of contents')

    # Get command
    get_parser = subparsers.add_parser('get', help='Render a document')
    get_parser.add_argument('path', type=str, nargs='?', default='', help='Document path (dir or dir/file)')

    # Page command
    page_parser = subparsers.add_parser('page', help='Render a standalone page')
    page_parser.add_argument('name', type=str, help='Page name')

    # Search command
    search_parser = subparsers.add_parser('search', help='Search documentation')
    search_parser.add_argument('query', type=str, help='Text to look for')

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    service = get_docs_service()
    if not reload_cli(service):
        sys.exit(1)

    if args.command == 'show-toc':
        show_toc_cli(service, args.lang)
    elif args.command == 'get':
        get_doc_cli(service, args.lang, args.path)
    elif args.command == 'page':
        get_page_cli(service, args.lang, args.name)
    elif args.command == 'search':
        search_cli(service, args.lang, args.query)


if __name__ == '__main__':
    main()

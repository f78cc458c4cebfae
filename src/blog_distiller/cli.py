"""Command-line interface for blog-distiller."""

import argparse
import logging
import sys
from pathlib import Path

from blog_distiller.compilers import ManifestCompiler, RSSCompiler
from blog_distiller.config import DUPLICATE_POLICIES, BuildConfig, load_config_file
from blog_distiller.exceptions import DistillerError, NotFound
from blog_distiller.store import DocumentStore

DEFAULT_OUTPUT_DIR = Path("./public")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> BuildConfig:
    """Merge the optional config file with command-line options.

    Args:
        args: Parsed command-line arguments

    Returns:
        The build configuration

    Raises:
        ValueError: If the merged configuration is invalid
    """
    config = load_config_file(args.config) if args.config else {}

    if args.content is not None:
        config["content_dir"] = str(args.content)
    if args.workers is not None:
        config["max_workers"] = args.workers
    if args.duplicates is not None:
        config["duplicate_policy"] = args.duplicates
    if getattr(args, "site_url", None):
        config["site_url"] = args.site_url
    if getattr(args, "include_drafts", False):
        config["include_drafts"] = True

    return BuildConfig(config)


def load_store(args: argparse.Namespace) -> tuple[BuildConfig, DocumentStore] | None:
    """Build the document store for a command, logging failures.

    Returns:
        Tuple of (config, store), or None if the store could not be built
    """
    logger = logging.getLogger(__name__)
    try:
        config = build_config(args)
        return config, DocumentStore.from_config(config)
    except (DistillerError, OSError, ValueError) as e:
        logger.error(f"Failed to load content: {e}")
        return None


def check_content(args: argparse.Namespace) -> int:
    """Execute the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every document loaded, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    loaded = load_store(args)
    if loaded is None:
        return 1
    _, store = loaded

    logger.info(f"Articles: {len(store)}")
    if store.errors:
        logger.error(f"Excluded documents: {len(store.errors)}")
        for error in store.errors:
            logger.error(f"  - {error}")
        return 1

    return 0


def list_articles(args: argparse.Namespace) -> int:
    """Execute the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    loaded = load_store(args)
    if loaded is None:
        return 1
    _, store = loaded

    if args.all:
        articles = store.list_articles()
    else:
        articles = store.list_articles(draft=args.drafts)

    for article in articles:
        marker = " (draft)" if article.draft else ""
        logger.info(f"{article.date.isoformat()}  {article.slug}  {article.title}{marker}")

    return 0


def show_article(args: argparse.Namespace) -> int:
    """Execute the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the slug is unknown)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    loaded = load_store(args)
    if loaded is None:
        return 1
    _, store = loaded

    try:
        article = store.get(args.slug)
    except NotFound as e:
        logger.error(str(e))
        return 1

    logger.info(f"Slug: {article.slug}")
    logger.info(f"  Path: {article.path}")
    logger.info(f"  Title: {article.title}")
    logger.info(f"  Date: {article.date.isoformat()}")
    if article.lastmod:
        logger.info(f"  Last modified: {article.lastmod.isoformat()}")
    logger.info(f"  Draft: {'yes' if article.draft else 'no'}")
    logger.info(f"  Tags: {', '.join(article.tags)}")
    logger.info(f"  Authors: {', '.join(article.authors)}")
    logger.info(f"  Summary: {article.summary}")
    if article.images:
        logger.info(f"  Images: {', '.join(article.images)}")
    if article.code_languages:
        logger.info(f"  Code languages: {', '.join(article.code_languages)}")
    for key, value in article.extra.items():
        logger.info(f"  {key}: {value}")

    return 0


def export_content(args: argparse.Namespace) -> int:
    """Execute the export command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    loaded = load_store(args)
    if loaded is None:
        return 1
    config, store = loaded

    output_dir = args.output
    try:
        manifest_path = ManifestCompiler(config.include_drafts).compile(store, output_dir)
        logger.info(f"Manifest: {manifest_path}")

        if config.site_url:
            feed_path = RSSCompiler(config).compile(store, output_dir)
            logger.info(f"Feed: {feed_path}")
        else:
            logger.info("No site_url configured, skipping RSS feed")
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write export: {e}")
        return 1

    if store.errors:
        logger.warning(f"  Excluded documents: {len(store.errors)}")
        for error in store.errors:
            logger.warning(f"    - {error}")

    return 0


def _add_content_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--content",
        type=Path,
        default=None,
        help="Directory holding the content documents",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (command-line options take precedence)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parser threads (default: 4)",
    )
    parser.add_argument(
        "--duplicates",
        choices=DUPLICATE_POLICIES,
        default=None,
        help="What to do when two documents share a slug (default: fail)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="blog-distiller",
        description="Load MDX blog posts into a document store and export manifests and feeds",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate every content document",
        description="Parse every content document and report the ones excluded from the store.",
    )
    _add_content_arguments(check_parser)
    check_parser.set_defaults(func=check_content)

    list_parser = subparsers.add_parser(
        "list",
        help="List articles newest first",
        description="List published articles by date descending.",
    )
    _add_content_arguments(list_parser)
    list_filter = list_parser.add_mutually_exclusive_group()
    list_filter.add_argument(
        "--drafts",
        action="store_true",
        help="List only draft articles",
    )
    list_filter.add_argument(
        "--all",
        action="store_true",
        help="List published and draft articles",
    )
    list_parser.set_defaults(func=list_articles)

    show_parser = subparsers.add_parser(
        "show",
        help="Show the metadata of one article",
        description="Show the decoded front-matter of the article with the given slug.",
    )
    show_parser.add_argument("slug", help="Article slug")
    _add_content_arguments(show_parser)
    show_parser.set_defaults(func=show_article)

    export_parser = subparsers.add_parser(
        "export",
        help="Write the content manifest and RSS feed",
        description="Write content-manifest.json and, when a site URL is configured, feed.xml.",
    )
    _add_content_arguments(export_parser)
    export_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    export_parser.add_argument(
        "--site-url",
        type=str,
        default=None,
        help="Public site URL used for feed links",
    )
    export_parser.add_argument(
        "--include-drafts",
        action="store_true",
        help="Include draft articles in the exports",
    )
    export_parser.set_defaults(func=export_content)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

"""pagebake CLI — build a site or list its routes.

Entry point registered as ``pagebake`` in ``pyproject.toml``::

    [project.scripts]
    pagebake = "pagebake.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagebake`` command."""
    parser = argparse.ArgumentParser(
        prog="pagebake",
        description="pagebake — compose pages and redirects into a static site.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every render step")
    subparsers = parser.add_subparsers(dest="command")

    # -- pagebake build ---------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Render a router to a directory")
    build_parser.add_argument("router", help="Import string (e.g. mysite:router)")
    build_parser.add_argument("--out", "-o", default="dist", help="Output directory")
    build_parser.add_argument(
        "--fallback-name",
        default="404",
        help="File name of fallback pages (default: 404)",
    )
    build_parser.add_argument(
        "--resolve-chains",
        action="store_true",
        help="Collapse redirect chains to their final target",
    )
    build_parser.add_argument(
        "--no-redirect-pages",
        action="store_true",
        help="Do not write HTML landing pages for redirects",
    )
    build_parser.add_argument(
        "--redirect-list",
        action="append",
        choices=("cloudflare", "static-web-server"),
        default=[],
        help="Write a redirect list for a static host (repeatable)",
    )
    build_parser.add_argument(
        "--sitemap",
        metavar="ORIGIN",
        default=None,
        help="Write sitemap.xml with URLs under ORIGIN (e.g. https://example.com)",
    )

    # -- pagebake routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. mysite:router)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "build":
        from pagebake.cli._build import run_build

        run_build(args)
    elif args.command == "routes":
        from pagebake.cli._routes import run_routes

        run_routes(args)

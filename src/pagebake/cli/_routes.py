"""``pagebake routes`` — list registered routes.

Resolves an import string to a pagebake Router and prints every page,
redirect, and fallback scope it declares.
"""

import argparse
import sys

from pagebake.cli._resolve import resolve_router
from pagebake.errors import PagebakeError


def run_routes(args: argparse.Namespace) -> None:
    """Print a KIND / PATH / TARGET table for ``args.router``."""
    try:
        router = resolve_router(args.router)
    except PagebakeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows: list[tuple[str, str, str]] = [("page", path, "") for path in router.routes]
    rows.extend(("redirect", source, target) for source, target in router.redirects.items())
    rows.extend(("fallback", scope, "") for scope in router.fallback_scopes)

    if not rows:
        print("No routes registered.")
        return

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("KIND", "PATH", "TARGET").rstrip())
    sep_len = max_kind + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for kind, path, target in rows:
        print(fmt.format(kind, path, target).rstrip())

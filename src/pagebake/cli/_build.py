"""``pagebake build`` — render a router to a directory.

Maps command-line flags onto a RenderConfig and renders the resolved
router. Any pagebake error aborts with exit code 1.
"""

import argparse
import sys
from typing import Any

from pagebake.cli._resolve import resolve_router
from pagebake.config import RenderConfig
from pagebake.errors import PagebakeError
from pagebake.render.redirects import RedirectList
from pagebake.render.routes import RouteList

_REDIRECT_LISTS = {
    "cloudflare": RedirectList.for_cloudflare_pages,
    "static-web-server": RedirectList.for_static_web_server,
}


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Translate parsed ``build`` arguments into a RenderConfig."""
    overrides: dict[str, Any] = {}
    if args.no_redirect_pages:
        overrides["redirect_page_renderer"] = None

    return RenderConfig(
        fallback_page_name=args.fallback_name,
        resolve_redirect_chains=args.resolve_chains,
        # dict.fromkeys drops repeated flags but keeps their order
        redirect_lists=tuple(_REDIRECT_LISTS[name]() for name in dict.fromkeys(args.redirect_list)),
        route_lists=(RouteList.sitemap(args.sitemap),) if args.sitemap else (),
        **overrides,
    )


def run_build(args: argparse.Namespace) -> None:
    """Render the router named by ``args.router`` into ``args.out``."""
    try:
        router = resolve_router(args.router)
        router.render(args.out, build_config(args))
    except PagebakeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Built {args.router} into {args.out}")

"""Render planning — flattens a router into page and file producers.

The plan is the last stop before output: every entry is a deferred
producer keyed by its final location, and nothing in it can conflict.
Steps run in a fixed order because later steps must not claim paths
taken by earlier ones:

1. Snapshot declared redirects and routes (for list files)
2. Resolve redirect chains (optional)
3. Materialize redirect pages (optional)
4. Place fallback pages
5. Render redirect lists
6. Render route lists
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pagebake.errors import ConfigurationError, FallbackRouteConflict, RouteConflict
from pagebake.render.redirects import RedirectPageRenderer, RedirectRecord
from pagebake.routing.redirects import resolve_redirects

if TYPE_CHECKING:
    from pagebake.config import RenderConfig
    from pagebake.routing.router import Router

logger = logging.getLogger("pagebake.render")

type Producer = Callable[[], str]


@dataclass(slots=True)
class RenderPlan:
    """Render-ready output: pages keyed by route path, extra files by name.

    A plan is consumed by exactly one sink.
    """

    pages: dict[str, Producer] = field(default_factory=dict)
    extra_files: dict[str, Producer] = field(default_factory=dict)
    consumed: bool = False

    def drain(self) -> tuple[Iterator[tuple[str, Producer]], Iterator[tuple[str, Producer]]]:
        """Hand out the producers once. Raises ``ConfigurationError`` on reuse."""
        if self.consumed:
            msg = "RenderPlan has already been rendered and cannot be reused."
            raise ConfigurationError(msg)
        self.consumed = True
        return iter(self.pages.items()), iter(self.extra_files.items())


def _redirect_page(renderer: RedirectPageRenderer, target: str) -> Producer:
    return lambda: renderer(target)


def _fixed(content: str) -> Producer:
    return lambda: content


def fallback_path(scope: str, page_name: str) -> str:
    """Where the fallback for ``scope`` lands.

    Examples::

        ("/", "404")      -> "/404"
        ("/blog", "404")  -> "/blog/404"
        ("/blog/", "404") -> "/blog/404"
    """
    if not scope.endswith("/"):
        scope += "/"
    return scope + page_name


def page_file_path(path: str) -> str:
    """Relative file path of the HTML file for route ``path``.

    Examples::

        "/"          -> "index.html"
        "/blog/post" -> "blog/post.html"
        "/blog/"     -> "blog/index.html"
    """
    relative = path.removeprefix("/")
    if not relative or relative.endswith("/"):
        relative += "index"
    return f"{relative}.html"


def _claim_page_files(pages: dict[str, Producer]) -> set[str]:
    """Map every page to its output file, rejecting shared files.

    ``/blog/`` and ``/blog/index`` are different routes that would both
    be written to ``blog/index.html``.
    """
    owners: dict[str, str] = {}
    for path in pages:
        file_path = page_file_path(path)
        if file_path in owners:
            msg = f"Routes `{owners[file_path]}` and `{path}` both render to {file_path!r}"
            raise RouteConflict(path, msg)
        owners[file_path] = path
    return set(owners)


def prepare_plan(router: Router, config: RenderConfig) -> RenderPlan:
    """Consume ``router`` and build its ``RenderPlan`` under ``config``.

    Raises ``RedirectCycle`` when chain resolution finds a loop,
    ``FallbackRouteConflict`` when a fallback page lands on an existing
    page, ``RouteConflict`` when two pages share an output file, and
    ``ConfigurationError`` when a list file name is already taken.
    """
    routes, redirects, fallbacks = router.take()

    declared_redirects = [RedirectRecord(source, target) for source, target in redirects.items()]
    declared_routes = list(routes)

    if config.resolve_redirect_chains:
        redirects = resolve_redirects(redirects)
        logger.debug("Resolved %d redirect chains", len(redirects))

    pages: dict[str, Producer] = dict(routes)

    renderer = config.redirect_page_renderer
    if renderer is not None:
        for source, target in redirects.items():
            pages[source] = _redirect_page(renderer, target)

    for scope, page in fallbacks.items():
        path = fallback_path(scope, config.fallback_page_name)
        if path in pages:
            raise FallbackRouteConflict(path)
        pages[path] = page

    claimed = _claim_page_files(pages)
    plan = RenderPlan(pages=pages)

    for redirect_list in config.redirect_lists:
        content = redirect_list.content_renderer(list(declared_redirects))
        _add_extra_file(plan, claimed, redirect_list.file_name, content)

    for route_list in config.route_lists:
        listed = list(declared_routes)
        if route_list.include_redirects:
            listed.extend(record.source for record in declared_redirects)
        content = route_list.content_renderer(listed)
        _add_extra_file(plan, claimed, route_list.file_name, content)

    logger.debug(
        "Planned %d pages (%d redirect pages, %d fallbacks) and %d extra files",
        len(plan.pages),
        len(redirects) if renderer is not None else 0,
        len(fallbacks),
        len(plan.extra_files),
    )
    return plan


def _add_extra_file(plan: RenderPlan, claimed: set[str], file_name: str, content: str) -> None:
    if file_name in claimed:
        msg = f"Two outputs write the same file: {file_name!r}"
        raise ConfigurationError(msg)
    claimed.add(file_name)
    plan.extra_files[file_name] = _fixed(content)

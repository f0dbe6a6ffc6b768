"""Route table builder with eager conflict detection.

Routes, redirects, and fallbacks are registered during setup and
consumed by a single render. Every conflict is raised at the call
that introduces it, so a site definition that builds is a site
definition that renders (barring fallback placement and redirect
cycles, which depend on the render configuration).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from pagebake.errors import (
    ConfigurationError,
    FallbackConflict,
    RouteConflict,
)
from pagebake.routing.route import Page, PageRenderer, Redirect, Response, validate_path

if TYPE_CHECKING:
    from pagebake.config import RenderConfig
    from pagebake.render.plan import RenderPlan
    from pagebake.render.sink import OutputMap

logger = logging.getLogger("pagebake.routing")


def normalize_prefix(prefix: str) -> str:
    """Normalize a nesting prefix for concatenation.

    ``"/"`` becomes ``""``; any other prefix loses its trailing slashes.

    Examples::

        "/"      -> ""
        "/blog"  -> "/blog"
        "/blog/" -> "/blog"
    """
    validate_path(prefix)
    if prefix == "/":
        return ""
    return prefix.rstrip("/")


class Router:
    """Maps paths to pages and redirects, ready to be rendered once.

    Usage::

        router = (
            Router()
            .route("/", get(lambda: "<h1>Home</h1>"))
            .route("/about", get(lambda: "<h1>About</h1>"))
            .route("/old-home", redirect("/"))
            .fallback(lambda: "<h1>404 Not Found</h1>")
        )
        router.render(Path("dist"))
    """

    __slots__ = ("_consumed", "_fallbacks", "_redirects", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, PageRenderer] = {}
        self._redirects: dict[str, str] = {}
        self._fallbacks: dict[str, PageRenderer] = {}
        self._consumed = False

    # -- Registration --------------------------------------------------------

    def route(self, path: str, response: Response) -> Router:
        """Add a page or redirect at ``path``.

        Raises ``InvalidPath`` for a malformed path or redirect target
        and ``RouteConflict`` if the path already has a handler.
        """
        self._check_open()
        validate_path(path)
        self._check_free(path)

        match response:
            case Page(render=page):
                self._routes[path] = page
            case Redirect(target=target):
                self._redirects[path] = validate_path(target)
            case _:
                msg = f"Unsupported response for {path!r}: {type(response).__name__}"
                raise ConfigurationError(msg)
        return self

    def fallback(self, page: PageRenderer) -> Router:
        """Set the page rendered for unmatched top-level paths."""
        return self.scoped_fallback("/", page)

    def scoped_fallback(self, scope: str, page: PageRenderer) -> Router:
        """Set the fallback page for paths under ``scope``.

        Raises ``FallbackConflict`` if ``scope`` already has one.
        """
        self._check_open()
        validate_path(scope)
        if scope in self._fallbacks:
            raise FallbackConflict(scope)
        self._fallbacks[scope] = page
        return self

    # -- Composition ---------------------------------------------------------

    def merge(self, router: Router) -> Router:
        """Merge another router's routes, redirects, and fallbacks.

        The other router is validated in full before anything is
        inserted, so a conflicting merge leaves this router unchanged.
        The merged router is consumed.
        """
        self._check_open()
        router._check_open()
        if router is self:
            msg = "Cannot merge a router into itself."
            raise ConfigurationError(msg)

        for path in (*router._redirects, *router._routes):
            self._check_free(path)
        for scope in router._fallbacks:
            if scope in self._fallbacks:
                raise FallbackConflict(scope)

        self._redirects.update(router._redirects)
        self._routes.update(router._routes)
        self._fallbacks.update(router._fallbacks)
        router._consume()

        logger.debug(
            "Merged %d routes, %d redirects, %d fallbacks",
            len(router._routes),
            len(router._redirects),
            len(router._fallbacks),
        )
        return self

    def nest(self, prefix: str, router: Router) -> Router:
        """Merge ``router`` with ``prefix`` prepended to all of its paths.

        Route paths, redirect sources and targets, and fallback scopes
        are all rewritten. A prefix of ``"/"`` is the same as no prefix.

        Usage::

            blog = (
                Router()
                .route("/", get(lambda: "<h1>Blog</h1>"))
                .route("/old", redirect("/"))
                .fallback(lambda: "<h1>Blog 404</h1>")
            )
            site = Router().nest("/blog", blog)
            # "/blog/", "/blog/old" -> "/blog/", fallback at "/blog/404"
        """
        self._check_open()
        router._check_open()
        if router is self:
            msg = "Cannot nest a router into itself."
            raise ConfigurationError(msg)
        prefix = normalize_prefix(prefix)

        rewritten = Router()
        rewritten._routes = {f"{prefix}{path}": page for path, page in router._routes.items()}
        rewritten._redirects = {
            f"{prefix}{source}": f"{prefix}{target}"
            for source, target in router._redirects.items()
        }
        rewritten._fallbacks = {
            f"{prefix}{scope}": page for scope, page in router._fallbacks.items()
        }

        self.merge(rewritten)
        router._consume()
        return self

    # -- Introspection -------------------------------------------------------

    @property
    def routes(self) -> tuple[str, ...]:
        """Page paths in registration order."""
        return tuple(self._routes)

    @property
    def redirects(self) -> dict[str, str]:
        """A copy of the declared redirects, source to target."""
        return dict(self._redirects)

    @property
    def fallback_scopes(self) -> tuple[str, ...]:
        """Scopes with a registered fallback."""
        return tuple(self._fallbacks)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __contains__(self, path: object) -> bool:
        return path in self._routes or path in self._redirects

    def __len__(self) -> int:
        return len(self._routes) + len(self._redirects)

    def __iter__(self) -> Iterator[str]:
        yield from self._routes
        yield from self._redirects

    # -- Rendering -----------------------------------------------------------

    def plan(self, config: RenderConfig | None = None) -> RenderPlan:
        """Consume the router and flatten it into a ``RenderPlan``."""
        from pagebake.config import RenderConfig
        from pagebake.render.plan import prepare_plan

        return prepare_plan(self, config or RenderConfig())

    def render(self, output_path: str | Path, config: RenderConfig | None = None) -> None:
        """Render the site into ``output_path``.

        Creates directories as needed and writes every page and extra
        file. Raises ``ArtifactWriteFailure`` on the first failed write.
        """
        from pagebake.render.sink import write_plan

        write_plan(self.plan(config), Path(output_path))

    def render_to_map(self, config: RenderConfig | None = None) -> OutputMap:
        """Render the site into memory.

        Page keys are route paths; extra file keys are file names.
        """
        from pagebake.render.sink import materialize_plan

        return materialize_plan(self.plan(config))

    # -- Internals -----------------------------------------------------------

    def take(
        self,
    ) -> tuple[dict[str, PageRenderer], dict[str, str], dict[str, PageRenderer]]:
        """Hand the tables over to the planner and consume the router."""
        self._check_open()
        self._consume()
        return self._routes, self._redirects, self._fallbacks

    def _check_open(self) -> None:
        if self._consumed:
            msg = "Router has already been rendered or merged and cannot be reused."
            raise ConfigurationError(msg)

    def _check_free(self, path: str) -> None:
        if path in self._routes or path in self._redirects:
            raise RouteConflict(path)

    def _consume(self) -> None:
        self._consumed = True

"""Render configuration.

RenderConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from pagebake.errors import ConfigurationError
from pagebake.render.redirects import RedirectList, RedirectPageRenderer, base_redirect_page
from pagebake.render.routes import RouteList


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Options for a single render. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RenderConfig(
            resolve_redirect_chains=True,
            redirect_lists=(RedirectList.for_cloudflare_pages(),),
            route_lists=(RouteList.sitemap("https://example.com"),),
        )
    """

    # Fallback pages land at "<scope>/<fallback_page_name>"
    fallback_page_name: str = "404"

    # Collapse a -> b -> c into a -> c before rendering
    resolve_redirect_chains: bool = False

    # Renders the landing page for each redirect; None skips redirect pages
    redirect_page_renderer: RedirectPageRenderer | None = base_redirect_page

    # Extra files
    redirect_lists: tuple[RedirectList, ...] = ()
    route_lists: tuple[RouteList, ...] = ()

    def __post_init__(self) -> None:
        if not self.fallback_page_name or "/" in self.fallback_page_name:
            msg = (
                "fallback_page_name must be a non-empty file name without '/', "
                f"got {self.fallback_page_name!r}"
            )
            raise ConfigurationError(msg)
        # Accept lists; store tuples so the config stays immutable.
        object.__setattr__(self, "redirect_lists", tuple(self.redirect_lists))
        object.__setattr__(self, "route_lists", tuple(self.route_lists))

"""Route list outputs — files that enumerate the rendered pages.

The main use is ``sitemap.xml``; any other listing format plugs in
through ``RouteList.content_renderer``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from html import escape

type RouteListRenderer = Callable[[list[str]], str]

_SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _sitemap_renderer(origin_url: str) -> RouteListRenderer:
    origin = origin_url.rstrip("/")

    def render(routes: list[str]) -> str:
        urls = "\n".join(
            f"  <url>\n    <loc>{escape(origin + route, quote=False)}</loc>\n  </url>"
            for route in routes
        )
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<urlset xmlns="{_SITEMAP_NAMESPACE}">\n'
            f"{urls}\n"
            "</urlset>"
        )

    return render


@dataclass(frozen=True, slots=True)
class RouteList:
    """Configuration for a file listing the site's routes.

    ``content_renderer`` receives page paths in registration order.
    Fallback pages never appear; redirect sources are appended when
    ``include_redirects`` is set.
    """

    file_name: str
    content_renderer: RouteListRenderer
    include_redirects: bool = False

    @classmethod
    def sitemap(cls, origin_url: str) -> RouteList:
        """A ``sitemap.xml`` listing every page under ``origin_url``.

        Usage::

            RouteList.sitemap("https://example.com")
        """
        return cls(file_name="sitemap.xml", content_renderer=_sitemap_renderer(origin_url))

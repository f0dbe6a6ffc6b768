"""pagebake — compose pages, redirects, and fallbacks into a static site.

Register paths on a router, nest sub-sites under prefixes, and bake
the result into HTML files plus the redirect lists and sitemaps that
static hosts read.

Basic usage::

    from pagebake import Router, get, redirect

    router = (
        Router()
        .route("/", get(lambda: "<h1>Home</h1>"))
        .route("/about", get(lambda: "<h1>About</h1>"))
        .route("/old-home", redirect("/"))
        .fallback(lambda: "<h1>404 Not Found</h1>")
    )
    router.render("dist")

Host integration::

    from pagebake import RedirectList, RenderConfig, RouteList

    config = RenderConfig(
        redirect_lists=(RedirectList.for_cloudflare_pages(),),
        route_lists=(RouteList.sitemap("https://example.com"),),
    )
"""

__version__ = "0.1.0"
__all__ = [
    "ArtifactWriteFailure",
    "ConfigurationError",
    "FallbackConflict",
    "FallbackRouteConflict",
    "InvalidPath",
    "OutputMap",
    "PagebakeError",
    "RedirectCycle",
    "RedirectList",
    "RedirectRecord",
    "RenderConfig",
    "RouteConflict",
    "RouteList",
    "Router",
    "base_redirect_page",
    "get",
    "redirect",
]

# Public name -> defining module, resolved on first access
_LAZY_IMPORTS: dict[str, str] = {
    "Router": "pagebake.routing.router",
    "get": "pagebake.routing.route",
    "redirect": "pagebake.routing.route",
    "RenderConfig": "pagebake.config",
    "OutputMap": "pagebake.render.sink",
    "RedirectList": "pagebake.render.redirects",
    "RedirectRecord": "pagebake.render.redirects",
    "RouteList": "pagebake.render.routes",
    "base_redirect_page": "pagebake.render.redirects",
    "ArtifactWriteFailure": "pagebake.errors",
    "ConfigurationError": "pagebake.errors",
    "FallbackConflict": "pagebake.errors",
    "FallbackRouteConflict": "pagebake.errors",
    "InvalidPath": "pagebake.errors",
    "PagebakeError": "pagebake.errors",
    "RedirectCycle": "pagebake.errors",
    "RouteConflict": "pagebake.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagebake`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)

"""Redirect outputs — landing pages and redirect list files.

A redirect can reach the rendered site two ways: as an HTML page at
the source path that forwards the browser (``base_redirect_page``),
and as a line in a host-specific redirect list (``RedirectList``).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from functools import cache

import tomli_w
from kida import Environment
from kida.utils.html import Markup

type RedirectPageRenderer = Callable[[str], str]
type RedirectListRenderer = Callable[[list[RedirectRecord]], str]

_REDIRECT_PAGE = """\
<!DOCTYPE HTML>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta http-equiv="refresh" content="0; url={{ target }}">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Page Redirection</title>
</head>
<body>
    <script>
        (function() {
            window.location.replace({{ target_js }});
        })();
    </script>

    <p>Redirecting to <a href="{{ target }}">{{ target }}</a>...</p>
</body>
</html>"""


@dataclass(frozen=True, slots=True)
class RedirectRecord:
    """A declared redirect, as handed to redirect list renderers."""

    source: str
    target: str


def _js_string(value: str) -> Markup:
    # "<" as \u003c keeps "</script>" from closing the script element
    return Markup(json.dumps(value).replace("<", "\\u003c"))


@cache
def _redirect_template():  # noqa: ANN202 — kida template object
    env = Environment(autoescape=True)
    return env.from_string(_REDIRECT_PAGE)


def base_redirect_page(target: str) -> str:
    """Render an HTML page that immediately redirects to ``target``.

    Uses a meta refresh and ``window.location.replace``; if both are
    blocked, the page still shows a link to the target. Attributes are
    HTML-escaped; the script gets a JSON string literal instead, since
    entities are not decoded inside ``<script>``.
    """
    return _redirect_template().render({"target": target, "target_js": _js_string(target)})


def _cloudflare_pages(redirects: list[RedirectRecord]) -> str:
    return "\n".join(f"{r.source} {r.target}" for r in redirects)


def _static_web_server(redirects: list[RedirectRecord]) -> str:
    rules = [{"source": r.source, "destination": r.target, "kind": 302} for r in redirects]
    return tomli_w.dumps({"advanced": {"redirects": rules}})


@dataclass(frozen=True, slots=True)
class RedirectList:
    """Configuration for a file listing every declared redirect.

    ``content_renderer`` receives the redirects as declared, before
    chain resolution, in registration order.
    """

    file_name: str
    content_renderer: RedirectListRenderer

    @classmethod
    def for_cloudflare_pages(cls) -> RedirectList:
        """A ``_redirects`` file with one ``source target`` rule per line.

        See https://developers.cloudflare.com/pages/configuration/redirects/
        """
        return cls(file_name="_redirects", content_renderer=_cloudflare_pages)

    @classmethod
    def for_static_web_server(cls) -> RedirectList:
        """A ``config.toml`` with the redirects as an array of tables.

        See https://static-web-server.net/features/url-redirects/
        """
        return cls(file_name="config.toml", content_renderer=_static_web_server)

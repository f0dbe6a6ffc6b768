"""Page and Redirect frozen dataclasses, plus the path rule they share."""

from collections.abc import Callable
from dataclasses import dataclass

from pagebake.errors import InvalidPath

type PageRenderer = Callable[[], str]


def validate_path(path: str) -> str:
    """Return ``path`` unchanged, or raise ``InvalidPath``.

    A path is valid when it is non-empty and starts with ``/``. No
    other normalization happens: ``/a`` and ``/a/`` are distinct.
    """
    if not path or not path.startswith("/"):
        raise InvalidPath(path)
    return path


@dataclass(frozen=True, slots=True)
class Page:
    """A route response that renders a page.

    ``render`` is called at most once, when the site is rendered.
    """

    render: PageRenderer


@dataclass(frozen=True, slots=True)
class Redirect:
    """A route response that points at another path."""

    target: str


type Response = Page | Redirect


def get(page: PageRenderer) -> Page:
    """Wrap a page rendering function into a page response.

    Usage::

        router.route("/", get(lambda: "<h1>Hello, world!</h1>"))
    """
    return Page(page)


def redirect(path: str) -> Redirect:
    """Create a redirect response to ``path``.

    Usage::

        router.route("/old-home", redirect("/"))
    """
    return Redirect(validate_path(path))

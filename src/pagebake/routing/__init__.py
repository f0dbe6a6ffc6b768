"""Routing — the route table builder and redirect resolution.

Routes are registered during setup, composed with ``merge``/``nest``,
and handed to the renderer exactly once.
"""

from pagebake.routing.redirects import resolve_redirects
from pagebake.routing.route import Page, Redirect, get, redirect, validate_path
from pagebake.routing.router import Router, normalize_prefix

__all__ = [
    "Page",
    "Redirect",
    "Router",
    "get",
    "normalize_prefix",
    "redirect",
    "resolve_redirects",
    "validate_path",
]

"""Rendering — planning, list files, and output sinks.

A consumed ``Router`` becomes a ``RenderPlan``; a sink turns the plan
into files on disk or an in-memory ``OutputMap``.
"""

from pagebake.render.plan import RenderPlan, fallback_path, page_file_path, prepare_plan
from pagebake.render.redirects import RedirectList, RedirectRecord, base_redirect_page
from pagebake.render.routes import RouteList
from pagebake.render.sink import OutputMap, materialize_plan, write_plan

__all__ = [
    "OutputMap",
    "RedirectList",
    "RedirectRecord",
    "RenderPlan",
    "RouteList",
    "base_redirect_page",
    "fallback_path",
    "materialize_plan",
    "page_file_path",
    "prepare_plan",
    "write_plan",
]

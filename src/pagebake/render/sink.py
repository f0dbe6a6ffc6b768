"""Artifact sinks — realize a RenderPlan on disk or in memory.

Filesystem layout::

    /           -> index.html
    /about      -> about.html
    /blog/      -> blog/index.html
    /blog/post  -> blog/post.html
    _redirects  -> _redirects   (extra files are written verbatim)

Every artifact must land under the output root.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pagebake.errors import ArtifactWriteFailure
from pagebake.render.plan import RenderPlan, page_file_path

logger = logging.getLogger("pagebake.render")


@dataclass(slots=True)
class OutputMap:
    """Rendered site content, keyed relative to the site root.

    ``pages`` is keyed by route path, ``extra_files`` by file name.
    """

    pages: dict[str, str] = field(default_factory=dict)
    extra_files: dict[str, str] = field(default_factory=dict)


def _write(root: Path, relative: str, content: str) -> None:
    target = (root / relative).resolve()
    if not target.is_relative_to(root):
        raise ArtifactWriteFailure(str(target), f"{relative!r} escapes the output directory {str(root)!r}")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ArtifactWriteFailure(str(target), exc.strerror or str(exc)) from exc


def write_plan(plan: RenderPlan, output_path: Path) -> None:
    """Write every page and extra file under ``output_path``.

    Stops at the first failed write with ``ArtifactWriteFailure``;
    files already written stay on disk. A page path or file name that
    would resolve outside ``output_path`` (``//etc/x``, ``../x``) fails
    the same way, before anything is written for it.
    """
    pages, extra_files = plan.drain()

    try:
        output_path.mkdir(parents=True, exist_ok=True)
        root = output_path.resolve()
    except OSError as exc:
        raise ArtifactWriteFailure(str(output_path), exc.strerror or str(exc)) from exc

    page_count = 0
    for path, page in pages:
        _write(root, page_file_path(path), page())
        page_count += 1

    file_count = 0
    for name, file in extra_files:
        _write(root, name, file())
        file_count += 1

    logger.info("Rendered %d pages and %d extra files to %s", page_count, file_count, output_path)


def materialize_plan(plan: RenderPlan) -> OutputMap:
    """Invoke every producer and collect the content in memory."""
    pages, extra_files = plan.drain()
    return OutputMap(
        pages={path: page() for path, page in pages},
        extra_files={name: file() for name, file in extra_files},
    )

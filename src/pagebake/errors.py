"""pagebake exception hierarchy.

Shared across Router, planner, sinks, and the CLI so every module
raises and catches the same types. Nothing here is recoverable: a
raised error means "fix the site definition and rebuild".
"""


class PagebakeError(Exception):
    """Base for all pagebake-specific errors."""


class ConfigurationError(PagebakeError):
    """Raised when a site definition or render configuration is invalid.

    Also raised when a consumed router or plan is used again.
    """


class InvalidPath(ConfigurationError, ValueError):  # noqa: N818 — mirrors the path rule it enforces
    """A path is empty or does not start with ``/``."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        if not detail:
            if not path:
                detail = 'Paths must start with a `/`. Use "/" for root routes'
            else:
                detail = f"Paths must start with a `/`, got {path!r}"
        super().__init__(detail)


class RouteConflict(ConfigurationError):
    """Two routes or redirects claim the same path."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        super().__init__(detail or f"Overlapping route. Handler for `{path}` already exists")


class FallbackConflict(ConfigurationError):
    """Two fallbacks are registered for the same scope."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Overlapping fallback. Fallback handler for `{scope}` already exists")


class FallbackRouteConflict(ConfigurationError):
    """A materialized fallback page lands on an existing page path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Overlap with fallback handler. Route `{path}` already exists")


class RedirectCycle(ConfigurationError):
    """Redirect-chain resolution revisited a path in the current chain.

    ``chain`` holds the walk from the redirect source up to and
    including the repeated path.
    """

    def __init__(self, chain: tuple[str, ...]) -> None:
        self.chain = chain
        super().__init__(f"Cycle in redirects starting at `{chain[-1]}`: {' -> '.join(chain)}")


class ArtifactWriteFailure(PagebakeError):  # noqa: N818 — conventional name for sink failures
    """Writing an artifact to the output directory failed.

    The underlying ``OSError`` is available as ``__cause__``. Files
    written before the failure are left in place.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        detail = f"Failed to write {path!r}"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)

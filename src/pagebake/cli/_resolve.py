"""Router lookup for the CLI.

``pagebake build`` and ``pagebake routes`` both take a ``module:attr``
string naming either a Router or a zero-argument factory that builds
one. A Router renders once, so a factory is the form to prefer when
the same module is built repeatedly (tests, watch scripts).
"""

import importlib

from pagebake.errors import ConfigurationError, PagebakeError
from pagebake.routing.router import Router

DEFAULT_ATTRIBUTE = "router"


def _load_attribute(import_string: str) -> object:
    module_path, _, attr_name = import_string.partition(":")
    try:
        module = importlib.import_module(module_path)
    except (ImportError, ValueError) as exc:
        msg = f"Cannot import module {module_path!r}: {exc}"
        raise ConfigurationError(msg) from exc

    attr_name = attr_name or DEFAULT_ATTRIBUTE
    try:
        return getattr(module, attr_name)
    except AttributeError as exc:
        msg = f"Module {module_path!r} has no attribute {attr_name!r}"
        raise ConfigurationError(msg) from exc


def resolve_router(import_string: str) -> Router:
    """Return the Router named by ``import_string``.

    ``"mysite"`` means ``mysite:router``. A callable that is not itself
    a Router is called with no arguments and must return one.

    A missing module or attribute, a factory that fails, or a target
    that is not a Router raises ``ConfigurationError``. pagebake errors
    raised while the factory builds its router propagate unchanged.
    """
    target = _load_attribute(import_string)

    if isinstance(target, Router):
        return target

    if callable(target):
        try:
            target = target()
        except PagebakeError:
            raise
        except Exception as exc:
            msg = f"Router factory {import_string!r} failed: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(target, Router):
        msg = f"{import_string!r} is a {type(target).__name__}, not a pagebake Router"
        raise ConfigurationError(msg)
    return target

"""Redirect-chain resolution.

Collapses ``a -> b -> c`` into ``a -> c`` and ``b -> c``. The walk is
iterative with a visited set per source, so termination does not
depend on recursion depth.
"""

from collections.abc import Mapping

from pagebake.errors import RedirectCycle


def resolve_redirects(redirects: Mapping[str, str]) -> dict[str, str]:
    """Map every redirect source to the end of its chain.

    A target that is not itself a redirect source ends the chain, even
    if no page exists there. Raises ``RedirectCycle`` when a chain
    comes back to a path it already passed through.
    """
    resolved: dict[str, str] = {}

    for source, target in redirects.items():
        chain = [source]
        visited = {source}
        final_target = target

        while final_target in redirects:
            if final_target in visited:
                raise RedirectCycle((*chain, final_target))
            visited.add(final_target)
            chain.append(final_target)
            final_target = redirects[final_target]

        resolved[source] = final_target

    return resolved

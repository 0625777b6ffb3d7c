"""Link target resolution.

Turns a destination plus a subpath decision into the ``href`` used for
routing and the ``as`` path shown in the address bar.
"""

from dataclasses import dataclass

from localelink.policy import SubpathDecision, add_subpath
from localelink.urls import Destination, Href, parse_destination


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    """Routing ``href`` and visible ``as_`` for one link.

    *as_* is ``None`` when the visible URL is just the href.
    """

    href: Destination
    as_: str | None = None


def resolve(
    destination: Destination,
    as_: str | None = None,
    decision: SubpathDecision | None = None,
) -> ResolvedTarget:
    """Resolve *destination* under *decision*.

    Without a subpath the destination object is handed back untouched
    and *as_* passes through as given. With a subpath the href becomes an
    ``Href`` whose query also carries ``lng`` and ``subpath``, and the
    visible path gets the ``/{label}`` prefix. The visible query string
    only ever holds the caller's own parameters.

    Raises:
        DestinationError: *destination* has an unsupported shape.
    """
    parsed = parse_destination(destination)
    if decision is None or not decision.applies or decision.label is None:
        return ResolvedTarget(href=destination, as_=as_)

    label = decision.label
    href = Href(
        pathname=parsed.pathname,
        query={**parsed.query, "lng": decision.language or "", "subpath": label},
        hash=parsed.hash,
    )
    if as_ is not None:
        return ResolvedTarget(href=href, as_=add_subpath(as_, label))
    visible = f"{parsed.pathname}{parsed.search}{parsed.hash}"
    return ResolvedTarget(href=href, as_=add_subpath(visible, label))

"""Link destinations and query-string helpers.

A destination is either a URL string (relative or absolute) or a
structured ``Href`` with a pathname and a query mapping. Plain mappings
with the same keys are accepted wherever an ``Href`` is.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from localelink.errors import DestinationError

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")


@dataclass(frozen=True, slots=True)
class Href:
    """A structured link destination.

    Usage::

        Href("/search", {"q": "python"})

    Compares by value but is unhashable, since *query* is a dict.
    """

    pathname: str
    query: dict[str, str] = field(default_factory=dict)
    hash: str = ""

    __hash__ = None  # type: ignore[assignment]


type Destination = str | Href | Mapping[str, object]


@dataclass(frozen=True, slots=True)
class ParsedDestination:
    """A destination split into the parts the resolver works with.

    *search* is the query suffix as it should be echoed in a visible
    URL, leading ``?`` included, or ``""``. String destinations keep
    their raw query text; structured ones are rebuilt with
    ``format_query``.
    """

    pathname: str
    query: dict[str, str]
    search: str = ""
    hash: str = ""
    is_absolute: bool = False


def is_absolute_url(url: str) -> bool:
    """Return True when *url* starts with ``scheme://``.

    Examples::

        >>> is_absolute_url("https://example.com/foo")
        True
        >>> is_absolute_url("/foo?next=https://example.com")
        False
    """
    return bool(_SCHEME_RE.match(url))


def parse_query(search: str) -> dict[str, str]:
    """Parse a query string into a mapping with unique keys.

    A leading ``?`` is ignored. Bare keys map to ``""`` and the first
    occurrence of a repeated key wins.
    """
    if search.startswith("?"):
        search = search[1:]
    query: dict[str, str] = {}
    for key, value in parse_qsl(search, keep_blank_values=True):
        query.setdefault(key, value)
    return query


def format_query(query: Mapping[str, object]) -> str:
    """Encode *query* as a query string without the leading ``?``.

    Empty values render as ``key=``.
    """
    if not query:
        return ""
    return urlencode({k: str(v) for k, v in query.items()}, quote_via=quote)


def parse_destination(destination: object) -> ParsedDestination:
    """Normalize a string or structured destination.

    Scheme and host of absolute URLs are dropped; only the path, query,
    and fragment survive.

    Raises:
        DestinationError: *destination* is not a string, ``Href``, or a
            mapping with a string ``pathname`` and a mapping ``query``.
    """
    if isinstance(destination, str):
        return _parse_string(destination)
    if isinstance(destination, Href):
        return _parse_structured(
            destination, destination.pathname, destination.query, destination.hash
        )
    if isinstance(destination, Mapping):
        return _parse_structured(
            destination,
            destination.get("pathname"),
            destination.get("query", {}),
            destination.get("hash", ""),
        )
    raise DestinationError(destination)


def format_href(href: object) -> str:
    """Render a destination as a URL string.

    Strings come back unchanged. Structured destinations become
    ``pathname[?query][#hash]``.
    """
    if isinstance(href, str):
        return href
    parsed = parse_destination(href)
    return f"{parsed.pathname}{parsed.search}{parsed.hash}"


def _parse_string(url: str) -> ParsedDestination:
    absolute = is_absolute_url(url)
    parts = urlsplit(url)
    pathname = parts.path
    if absolute and not pathname:
        pathname = "/"
    return ParsedDestination(
        pathname=pathname,
        query=parse_query(parts.query),
        search=f"?{parts.query}" if parts.query else "",
        hash=f"#{parts.fragment}" if parts.fragment else "",
        is_absolute=absolute,
    )


def _parse_structured(
    destination: object,
    pathname: object,
    query: object,
    hash_: object,
) -> ParsedDestination:
    if not isinstance(pathname, str):
        raise DestinationError(
            destination,
            f"Structured link destination needs a string 'pathname', got {pathname!r}",
        )
    if query is None:
        query = {}
    if not isinstance(query, Mapping):
        raise DestinationError(
            destination,
            f"Structured link destination needs a mapping 'query', "
            f"got {type(query).__name__}",
        )
    encoded = format_query(query)
    fragment = str(hash_ or "")
    if fragment and not fragment.startswith("#"):
        fragment = f"#{fragment}"
    return ParsedDestination(
        pathname=pathname,
        query={str(k): str(v) for k, v in query.items()},
        search=f"?{encoded}" if encoded else "",
        hash=fragment,
        is_absolute=is_absolute_url(pathname),
    )

"""Link shell: policy, resolver, and sanitizer composed for one link.

Language and configuration are explicit arguments. Whatever supplies
the current language (a request, a translation context) passes it in.

Usage::

    from localelink import LocaleConfig, link_props

    attrs = link_props({"href": "/foo", "class": "nav"}, config=config, language="de")
    attrs["as"]  # "/german/foo"
"""

import logging
from collections.abc import Mapping
from typing import Any

from localelink.config import LocaleConfig
from localelink.errors import DestinationError
from localelink.policy import decide
from localelink.props import sanitize_props
from localelink.resolver import ResolvedTarget, resolve
from localelink.urls import Destination, format_href

logger = logging.getLogger("localelink")

_DISPLAY_KEYS = ("as", "as_")


def link_props(
    props: Mapping[str, Any],
    *,
    config: LocaleConfig,
    language: str | None = None,
) -> dict[str, Any]:
    """Compute the properties to forward to the link primitive.

    *props* must hold ``href``; an explicit display path may be given
    under ``as`` (or ``as_``). The result holds the resolved ``href``,
    ``as`` when there is one, then every remaining property except the
    translation-context ones.

    Raises:
        DestinationError: ``href`` is missing or has an unsupported shape.
    """
    if "href" not in props:
        raise DestinationError(None, "Link properties need an 'href'")
    display = next((props[k] for k in _DISPLAY_KEYS if props.get(k) is not None), None)

    decision = decide(config, language)
    target = resolve(props["href"], display, decision)
    if decision.applies:
        logger.debug(
            "Link %r resolved with subpath %r for %r: as=%r",
            props["href"],
            decision.label,
            language,
            target.as_,
        )

    rest = {k: v for k, v in props.items() if k != "href" and k not in _DISPLAY_KEYS}
    result: dict[str, Any] = {"href": target.href}
    if target.as_ is not None:
        result["as"] = target.as_
    result.update(sanitize_props(rest))
    return result


class LocaleLinker:
    """Resolve links against one ``LocaleConfig``.

    Usage::

        linker = LocaleLinker(config)
        linker.url("/foo/bar", "de")  # "/german/foo/bar"
    """

    __slots__ = ("config",)

    def __init__(self, config: LocaleConfig) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"LocaleLinker({self.config!r})"

    def resolve(
        self,
        href: Destination,
        language: str | None,
        as_: str | None = None,
    ) -> ResolvedTarget:
        return resolve(href, as_, decide(self.config, language))

    def props(self, props: Mapping[str, Any], language: str | None) -> dict[str, Any]:
        return link_props(props, config=self.config, language=language)

    def url(self, href: Destination, language: str | None, as_: str | None = None) -> str:
        """Return the URL the browser should show for this link."""
        target = self.resolve(href, language, as_)
        if target.as_ is not None:
            return target.as_
        return format_href(target.href)

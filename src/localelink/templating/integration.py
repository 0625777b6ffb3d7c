"""Kida environment binding.

Registers ``locale_url`` and ``locale_link_attrs`` globals bound to a
``LocaleConfig``, plus the ``href_url`` filter, so templates can render
subpath-aware links::

    <a{{ locale_link_attrs("/foo/bar", lng) }}>Foo</a>
    <a href="{{ locale_url(item.href, lng) }}">{{ item.title }}</a>
"""

import html
from collections.abc import Callable
from functools import partial
from typing import Any

from kida import Environment
from kida.template import Markup

from localelink.config import LocaleConfig
from localelink.link import LocaleLinker
from localelink.urls import Destination, format_href

TEMPLATE_FILTERS: dict[str, Callable[..., Any]] = {
    "href_url": format_href,
}


def locale_link_attrs(
    linker: LocaleLinker,
    href: Destination,
    lng: str | None = None,
    as_: str | None = None,
) -> Markup:
    """Build an escaped `` href="..."`` attribute for a localized link."""
    value = linker.url(href, lng, as_)
    return Markup(f' href="{html.escape(value)}"')


def bind_environment(env: Environment, config: LocaleConfig) -> Environment:
    """Register the locale link globals and filters on *env*.

    Returns *env* so calls can be chained.
    """
    linker = LocaleLinker(config)
    env.update_filters(TEMPLATE_FILTERS)
    env.add_global("locale_url", _locale_url(linker))
    env.add_global("locale_link_attrs", partial(locale_link_attrs, linker))
    return env


def create_environment(config: LocaleConfig, **options: Any) -> Environment:
    """Create a kida Environment with autoescape on and locale links bound.

    Extra keyword arguments go straight to ``Environment``.
    """
    options.setdefault("autoescape", True)
    return bind_environment(Environment(**options), config)


def _locale_url(linker: LocaleLinker) -> Callable[..., str]:
    def locale_url(href: Destination, lng: str | None = None, as_: str | None = None) -> str:
        return linker.url(href, lng, as_)

    return locale_url

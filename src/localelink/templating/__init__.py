"""kida integration for locale-aware links."""

from localelink.templating.integration import (
    TEMPLATE_FILTERS,
    bind_environment,
    create_environment,
    locale_link_attrs,
)

__all__ = [
    "TEMPLATE_FILTERS",
    "bind_environment",
    "create_environment",
    "locale_link_attrs",
]

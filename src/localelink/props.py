"""Translation-context property filtering.

The translation provider hands links a handful of properties (the ``t``
function, the ``i18n`` instance, namespaces, ...) that the link
primitive does not understand. ``sanitize_props`` drops them.
"""

from collections.abc import Mapping
from typing import Any

TRANSLATION_PROPS: frozenset[str] = frozenset(
    {
        "defaultNS",
        "i18n",
        "i18nOptions",
        "lng",
        "reportNS",
        "t",
        "tReady",
        # snake_case spellings used by Python callers
        "default_ns",
        "i18n_options",
        "report_ns",
        "t_ready",
    }
)


def sanitize_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *props* without translation-context keys.

    Order of the remaining keys is preserved and *props* is not mutated.
    """
    return {key: value for key, value in props.items() if key not in TRANSLATION_PROPS}

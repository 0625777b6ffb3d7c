"""Locale configuration.

LocaleConfig is a frozen dataclass. It is built once (directly or via
``LocaleConfig.from_mapping``) and passed explicitly to the policy and
resolver, never read from ambient global state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from localelink.errors import ConfigurationError

logger = logging.getLogger("localelink.config")


class SubpathMode(StrEnum):
    """Which languages get a subpath prefix in the visible URL."""

    NONE = "none"
    FOREIGN = "foreign"  # every language except the default
    ALL = "all"


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Locale configuration. Immutable after creation.

    Usage::

        config = LocaleConfig(
            all_languages=("en", "de"),
            default_language="en",
            locale_subpaths=SubpathMode.FOREIGN,
            subpaths={"de": "german"},
        )

    ``default_language`` is expected to be one of ``all_languages``.
    ``from_mapping`` checks that; the constructor does not.
    """

    all_languages: tuple[str, ...]
    default_language: str
    locale_subpaths: SubpathMode = SubpathMode.NONE
    subpaths: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "all_languages", tuple(self.all_languages))
        object.__setattr__(self, "locale_subpaths", _coerce_mode(self.locale_subpaths))
        object.__setattr__(self, "subpaths", MappingProxyType(dict(self.subpaths)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LocaleConfig:
        """Build a validated config from a plain mapping.

        Accepts next-i18next style keys (``allLanguages``,
        ``defaultLanguage``, ``localeSubpaths``, ``subpaths``) or their
        snake_case spellings. ``localeSubpaths`` may also be the subpath
        table itself, in which case the table alone decides which
        languages get a subpath (mode ``ALL``).

        Raises:
            ConfigurationError: Unknown mode, no languages, a default
                language that is not in ``allLanguages``, or a subpath
                label that is empty or contains ``/``.
        """
        all_languages = _pick(data, "allLanguages", "all_languages", ())
        if isinstance(all_languages, str):
            all_languages = (all_languages,)
        all_languages = tuple(all_languages)
        if not all_languages:
            raise ConfigurationError("allLanguages must name at least one language")

        default_language = _pick(data, "defaultLanguage", "default_language", None)
        if default_language is None:
            default_language = all_languages[0]
        if default_language not in all_languages:
            raise ConfigurationError(
                f"defaultLanguage {default_language!r} is not one of "
                f"allLanguages {list(all_languages)!r}"
            )

        raw_mode = _pick(data, "localeSubpaths", "locale_subpaths", SubpathMode.NONE)
        subpaths = _pick(data, "subpaths", "subpaths", {})
        if not isinstance(subpaths, Mapping):
            raise ConfigurationError(
                f"subpaths must be a mapping of language to label, "
                f"got {type(subpaths).__name__}"
            )
        if isinstance(raw_mode, Mapping):
            subpaths = {**raw_mode, **subpaths}
            raw_mode = SubpathMode.ALL if raw_mode else SubpathMode.NONE
        mode = _coerce_mode(raw_mode)

        for language, label in subpaths.items():
            if not isinstance(label, str) or not label or "/" in label:
                raise ConfigurationError(
                    f"Subpath label for {language!r} must be a non-empty path "
                    f"segment without '/', got {label!r}"
                )
            if language not in all_languages:
                logger.warning(
                    "Subpath %r is configured for %r, which is not in allLanguages",
                    label,
                    language,
                )

        return cls(
            all_languages=all_languages,
            default_language=default_language,
            locale_subpaths=mode,
            subpaths=subpaths,
        )


def _coerce_mode(raw: object) -> SubpathMode:
    try:
        return SubpathMode(str(raw).lower())
    except ValueError:
        choices = ", ".join(m.value for m in SubpathMode)
        raise ConfigurationError(
            f"Unknown localeSubpaths mode {raw!r}. Expected one of: {choices}"
        ) from None


def _pick(data: Mapping[str, Any], camel: str, snake: str, default: Any) -> Any:
    if camel in data:
        return data[camel]
    return data.get(snake, default)

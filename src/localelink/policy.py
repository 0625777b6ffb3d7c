"""Locale subpath policy.

Decides whether a language gets a subpath prefix (``/german/...``) in
the visible URL, and provides the small path helpers that add, detect,
and remove that prefix.
"""

from dataclasses import dataclass

from localelink.config import LocaleConfig, SubpathMode


@dataclass(frozen=True, slots=True)
class SubpathDecision:
    """Outcome of ``decide``. *label* is set only when *applies* is True."""

    applies: bool
    label: str | None = None
    language: str | None = None


_NO_SUBPATH = SubpathDecision(applies=False)


def decide(config: LocaleConfig, language: str | None) -> SubpathDecision:
    """Decide whether *language* gets a subpath under *config*.

    - No language, or mode ``NONE``: never.
    - Mode ``FOREIGN``: never for the default language.
    - Otherwise: only when the subpath table has an entry for *language*.

    Missing and unknown languages are not errors; they just get no
    subpath.
    """
    if not language:
        return _NO_SUBPATH
    mode = config.locale_subpaths
    if mode is SubpathMode.NONE:
        return _NO_SUBPATH
    if mode is SubpathMode.FOREIGN and language == config.default_language:
        return _NO_SUBPATH
    label = config.subpaths.get(language)
    if label is None:
        return _NO_SUBPATH
    return SubpathDecision(applies=True, label=label, language=language)


def subpath_is_required(config: LocaleConfig, language: str | None) -> bool:
    return decide(config, language).applies


def add_subpath(path: str, label: str) -> str:
    """Prefix *path* with ``/{label}``.

    Examples::

        >>> add_subpath("/foo?bar", "german")
        '/german/foo?bar'
        >>> add_subpath("", "german")
        '/german'
    """
    if path and path[0] not in "/?#":
        path = f"/{path}"
    return f"/{label}{path}"


def subpath_is_present(path: str, label: str) -> bool:
    """Return True when the first segment of *path* is *label*."""
    prefix = f"/{label}"
    if not path.startswith(prefix):
        return False
    rest = path[len(prefix) :]
    return not rest or rest[0] in "/?#"


def remove_subpath(path: str, label: str) -> str:
    """Strip a leading ``/{label}`` segment from *path*.

    Paths without the subpath are returned unchanged. The bare subpath
    maps to the root.
    """
    if not subpath_is_present(path, label):
        return path
    rest = path[len(label) + 1 :]
    if not rest or rest[0] != "/":
        rest = f"/{rest}"
    return rest


def language_from_subpath(config: LocaleConfig, path: str) -> str | None:
    """Return the language whose subpath starts *path*, if any."""
    for language, label in config.subpaths.items():
        if subpath_is_present(path, label):
            return language
    return None

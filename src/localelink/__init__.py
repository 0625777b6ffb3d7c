"""localelink — locale subpath links for server-rendered HTML.

Computes the routing ``href`` and the visible ``as`` path of a link for
the current language, adding a language subpath (``/german/...``) when
the configured policy asks for one.

Basic usage::

    from localelink import LocaleConfig, SubpathMode, link_props

    config = LocaleConfig(
        all_languages=("en", "de"),
        default_language="en",
        locale_subpaths=SubpathMode.FOREIGN,
        subpaths={"de": "german"},
    )
    link_props({"href": "/foo/bar"}, config=config, language="de")

Templates (kida)::

    from localelink.templating import create_environment
    env = create_environment(config)
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "DestinationError",
    "Href",
    "LocaleConfig",
    "LocaleLinkError",
    "LocaleLinker",
    "ResolvedTarget",
    "SubpathDecision",
    "SubpathMode",
    "decide",
    "link_props",
    "resolve",
    "sanitize_props",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import localelink`` fast while providing a clean top-level API.
    """
    if name in ("LocaleConfig", "SubpathMode"):
        from localelink import config as _config

        return getattr(_config, name)

    if name in ("ConfigurationError", "DestinationError", "LocaleLinkError"):
        from localelink import errors as _errors

        return getattr(_errors, name)

    if name == "Href":
        from localelink.urls import Href

        return Href

    if name in ("SubpathDecision", "decide"):
        from localelink import policy as _policy

        return getattr(_policy, name)

    if name in ("ResolvedTarget", "resolve"):
        from localelink import resolver as _resolver

        return getattr(_resolver, name)

    if name in ("LocaleLinker", "link_props"):
        from localelink import link as _link

        return getattr(_link, name)

    if name == "sanitize_props":
        from localelink.props import sanitize_props

        return sanitize_props

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

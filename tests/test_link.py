"""Tests for localelink.link — the full props pipeline for a link."""

import logging

import pytest

from localelink.config import LocaleConfig, SubpathMode
from localelink.errors import DestinationError
from localelink.link import LocaleLinker, link_props
from localelink.urls import Href


def _config(mode: SubpathMode = SubpathMode.NONE, default: str = "en") -> LocaleConfig:
    return LocaleConfig(
        all_languages=("en", "de"),
        default_language=default,
        locale_subpaths=mode,
        subpaths={"de": "german"},
    )


class TestWithoutLanguageSubpath:
    def test_none_mode(self) -> None:
        result = link_props({"href": "/foo/bar"}, config=_config(), language="de")
        assert result == {"href": "/foo/bar"}
        assert "as" not in result

    def test_none_mode_with_as(self) -> None:
        props = {"href": "/foo/bar", "as": "/foo?bar"}
        result = link_props(props, config=_config(), language="de")
        assert result["href"] == "/foo/bar"
        assert result["as"] == "/foo?bar"

    def test_language_undefined(self) -> None:
        config = _config(SubpathMode.FOREIGN)
        assert link_props({"href": "/foo/bar"}, config=config) == {"href": "/foo/bar"}
        result = link_props({"href": "/foo/bar", "as": "/foo?bar"}, config=config)
        assert result == {"href": "/foo/bar", "as": "/foo?bar"}

    def test_default_language_under_foreign(self) -> None:
        config = _config(SubpathMode.FOREIGN)
        assert link_props({"href": "/foo/bar"}, config=config, language="en") == {
            "href": "/foo/bar"
        }
        result = link_props(
            {"href": "/foo/bar", "as": "/foo?bar"}, config=config, language="en"
        )
        assert result == {"href": "/foo/bar", "as": "/foo?bar"}


class TestWithLanguageSubpath:
    def test_no_query(self) -> None:
        result = link_props(
            {"href": "/foo/bar"}, config=_config(SubpathMode.FOREIGN), language="de"
        )
        assert result["href"] == Href("/foo/bar", {"lng": "de", "subpath": "german"})
        assert result["as"] == "/german/foo/bar"

    def test_query(self) -> None:
        result = link_props(
            {"href": "/foo/bar?baz"}, config=_config(SubpathMode.FOREIGN), language="de"
        )
        assert result["href"] == Href(
            "/foo/bar", {"baz": "", "lng": "de", "subpath": "german"}
        )
        assert result["as"] == "/german/foo/bar?baz"

    def test_explicit_as(self) -> None:
        result = link_props(
            {"href": "/foo/bar", "as": "/foo?bar"},
            config=_config(SubpathMode.FOREIGN),
            language="de",
        )
        assert result["href"] == Href("/foo/bar", {"lng": "de", "subpath": "german"})
        assert result["as"] == "/german/foo?bar"

    def test_as_underscore_spelling(self) -> None:
        result = link_props(
            {"href": "/foo/bar", "as_": "/foo?bar"},
            config=_config(SubpathMode.FOREIGN),
            language="de",
        )
        assert result["as"] == "/german/foo?bar"
        assert "as_" not in result

    def test_full_url(self) -> None:
        result = link_props(
            {"href": "https://my-website.com/foo/bar?baz"},
            config=_config(SubpathMode.FOREIGN),
            language="de",
        )
        assert result["href"] == Href(
            "/foo/bar", {"baz": "", "lng": "de", "subpath": "german"}
        )
        assert result["as"] == "/german/foo/bar?baz"

    def test_logs_applied_subpath(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="localelink"):
            link_props({"href": "/foo"}, config=_config(SubpathMode.FOREIGN), language="de")
        assert "german" in caplog.text


class TestStructuredHref:
    """Object hrefs are parsed rather than stringified."""

    def test_none_mode(self) -> None:
        href = {"pathname": "/foo/bar", "query": {}}
        result = link_props({"href": href}, config=_config(), language="de")
        assert result == {"href": {"pathname": "/foo/bar", "query": {}}}
        assert result["href"] is href

    def test_none_mode_with_as(self) -> None:
        props = {"href": {"pathname": "/foo/bar", "query": {}}, "as": "/foo?bar"}
        result = link_props(props, config=_config(), language="de")
        assert result["href"] == {"pathname": "/foo/bar", "query": {}}
        assert result["as"] == "/foo?bar"

    def test_foreign_mode(self) -> None:
        props = {"href": {"pathname": "/foo/bar", "query": {}}}
        result = link_props(props, config=_config(SubpathMode.FOREIGN), language="de")
        assert result["href"] == Href("/foo/bar", {"lng": "de", "subpath": "german"})
        assert result["as"] == "/german/foo/bar"

    def test_foreign_mode_with_as(self) -> None:
        props = {"href": {"pathname": "/foo/bar", "query": {}}, "as": "/foo?bar"}
        result = link_props(props, config=_config(SubpathMode.FOREIGN), language="de")
        assert result["as"] == "/german/foo?bar"

    def test_foreign_mode_with_query(self) -> None:
        props = {"href": {"pathname": "/foo/bar", "query": {"baz": ""}}}
        result = link_props(props, config=_config(SubpathMode.FOREIGN), language="de")
        assert result["href"] == Href(
            "/foo/bar", {"baz": "", "lng": "de", "subpath": "german"}
        )
        assert result["as"] == "/german/foo/bar?baz="


class TestPropStripping:
    def test_translation_props_removed(self) -> None:
        names = ["defaultNS", "i18n", "i18nOptions", "lng", "reportNS", "t", "tReady"]
        props = {"href": "/foo/bar", **{name: i for i, name in enumerate(names)}}
        result = link_props(props, config=_config(), language="de")
        for name in names:
            assert name not in result

    def test_other_props_forwarded(self) -> None:
        props = {"href": "/foo", "prefetch": False, "t": 1, "class": "nav"}
        result = link_props(props, config=_config(SubpathMode.FOREIGN), language="de")
        assert list(result) == ["href", "as", "prefetch", "class"]

    def test_input_not_mutated(self) -> None:
        props = {"href": "/foo", "t": 1}
        link_props(props, config=_config(SubpathMode.FOREIGN), language="de")
        assert props == {"href": "/foo", "t": 1}


class TestErrors:
    def test_missing_href(self) -> None:
        with pytest.raises(DestinationError, match="href"):
            link_props({"as": "/foo"}, config=_config(), language="de")

    def test_malformed_href(self) -> None:
        with pytest.raises(DestinationError):
            link_props({"href": 42}, config=_config(), language="de")


class TestLocaleLinker:
    def test_url_with_subpath(self) -> None:
        linker = LocaleLinker(_config(SubpathMode.FOREIGN))
        assert linker.url("/foo/bar", "de") == "/german/foo/bar"

    def test_url_without_subpath(self) -> None:
        linker = LocaleLinker(_config(SubpathMode.FOREIGN))
        assert linker.url("/foo/bar?baz", "en") == "/foo/bar?baz"

    def test_url_structured_without_subpath(self) -> None:
        linker = LocaleLinker(_config())
        assert linker.url(Href("/foo", {"page": "2"}), "de") == "/foo?page=2"

    def test_url_prefers_explicit_as(self) -> None:
        linker = LocaleLinker(_config())
        assert linker.url("/post?id=1", "de", "/posts/1") == "/posts/1"

    def test_resolve(self) -> None:
        target = LocaleLinker(_config(SubpathMode.FOREIGN)).resolve("/foo", "de")
        assert target.as_ == "/german/foo"

    def test_props(self) -> None:
        linker = LocaleLinker(_config(SubpathMode.FOREIGN))
        assert linker.props({"href": "/foo", "t": 1}, "en") == {"href": "/foo"}

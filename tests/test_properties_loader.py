"""
Tests for loading property stores from one or many sources.
"""

import io
import logging

import pytest

from plugconf.properties import (
    PropertiesLoader,
    PropertySource,
    SearchPathLocator,
    load_properties,
    read_source,
)


@pytest.fixture
def search_dirs(tmp_path):
    """Three directories, each with its own app.properties."""
    d1, d2, d3 = tmp_path / "d1", tmp_path / "d2", tmp_path / "d3"
    for d in (d1, d2, d3):
        d.mkdir()
    (d1 / "app.properties").write_text("a=1\nb=1\n", encoding="iso-8859-1")
    (d2 / "app.properties").write_text("b=2\nc=2\n", encoding="iso-8859-1")
    (d3 / "app.properties").write_text("d=3\n", encoding="iso-8859-1")
    return [d1, d2, d3]


class FailingLocator:
    def find(self, name):
        raise OSError("search path unavailable")


class TestSearchPathLocator:

    def test_finds_in_order(self, search_dirs, tmp_path):
        locator = SearchPathLocator(search_dirs + [tmp_path / "missing"])
        found = locator.find("app.properties")
        assert [s.location for s in found] == [str(d / "app.properties") for d in search_dirs]

    def test_from_string(self, search_dirs):
        import os
        locator = SearchPathLocator.from_string(os.pathsep.join(str(d) for d in search_dirs[:2]))
        assert locator.directories == search_dirs[:2]

    def test_blank_string_means_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert SearchPathLocator.from_string("").directories == [tmp_path]


class TestReadSource:

    def test_missing_file_is_an_outcome_not_an_exception(self, tmp_path):
        outcome = read_source(PropertySource.from_path(tmp_path / "nope.properties"))
        assert not outcome.ok
        assert outcome.properties == {}
        assert outcome.error.location.endswith("nope.properties")
        assert isinstance(outcome.error.cause, OSError)


class TestPropertiesLoader:

    def test_multi_file_later_wins(self, search_dirs):
        loader = PropertiesLoader(SearchPathLocator(search_dirs[:2]))
        assert loader.load("app.properties", allow_multi_file=True) == {"a": "1", "b": "2", "c": "2"}

    def test_single_file_uses_first_and_warns(self, search_dirs, caplog):
        loader = PropertiesLoader(SearchPathLocator(search_dirs[:2]))
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            props = loader.load("app.properties")
        assert props == {"a": "1", "b": "1"}
        assert "Only 1 app.properties file is expected, but 2 found" in caplog.text

    def test_single_match(self, search_dirs, caplog):
        loader = PropertiesLoader(SearchPathLocator(search_dirs[2:]))
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            assert loader.load("app.properties") == {"d": "3"}
        assert caplog.text == ""

    def test_no_match(self, tmp_path, caplog):
        loader = PropertiesLoader(SearchPathLocator([tmp_path]))
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            assert loader.load("app.properties") == {}
        assert caplog.text == ""
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            assert loader.load("app.properties", allow_empty_file=True) == {}
        assert "No app.properties found" in caplog.text

    def test_broken_source_is_skipped(self, search_dirs, caplog):
        (search_dirs[1] / "app.properties").write_text("x=\\u12\n", encoding="iso-8859-1")
        loader = PropertiesLoader(SearchPathLocator(search_dirs))
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            props = loader.load("app.properties", allow_multi_file=True)
        assert props == {"a": "1", "b": "1", "d": "3"}
        assert str(search_dirs[1] / "app.properties") in caplog.text

    def test_absolute_path(self, search_dirs):
        loader = PropertiesLoader(SearchPathLocator([]))
        assert loader.load(str(search_dirs[1] / "app.properties")) == {"b": "2", "c": "2"}

    def test_missing_absolute_path(self, tmp_path, caplog):
        loader = PropertiesLoader(SearchPathLocator([]))
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            assert loader.load(str(tmp_path / "absent.properties")) == {}
        assert "absent.properties" in caplog.text

    def test_locator_failure_is_not_fatal(self, caplog):
        loader = PropertiesLoader(FailingLocator())
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            assert loader.load("app.properties", allow_multi_file=True) == {}
        assert "search path unavailable" in caplog.text

    def test_module_helper(self, search_dirs):
        locator = SearchPathLocator(search_dirs)
        assert load_properties("app.properties", True, locator=locator)["d"] == "3"


class ListLocator:
    def __init__(self, sources):
        self.sources = sources

    def find(self, name):
        return list(self.sources)


class TestUnexpectedSourceErrors:

    def _broken(self):
        def opener():
            raise RuntimeError("boom")
        return PropertySource(location="mem://broken", opener=opener)

    def _ok(self):
        return PropertySource(location="mem://ok", opener=lambda: io.BytesIO(b"a=1\n"))

    def test_failing_source_is_skipped(self, caplog):
        loader = PropertiesLoader(ListLocator([self._broken(), self._ok()]))
        with caplog.at_level(logging.WARNING, logger="plugconf.properties.loader"):
            assert loader.load("x", allow_multi_file=True) == {"a": "1"}
        assert "mem://broken" in caplog.text

    def test_unknown_encoding_is_an_outcome(self):
        outcome = read_source(self._ok(), encoding="no-such-codec")
        assert not outcome.ok
        assert isinstance(outcome.error.cause, LookupError)

    def test_locator_runtime_error_is_not_fatal(self):
        class Exploding:
            def find(self, name):
                raise RuntimeError("lookup broke")
        assert PropertiesLoader(Exploding()).load("x") == {}

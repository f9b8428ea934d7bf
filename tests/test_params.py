"""Tests for level.routing.params — path parameter conversion."""

import pytest

from level.routing.params import CONVERTERS, convert_param


class TestConverters:
    def test_only_str_registered(self) -> None:
        assert set(CONVERTERS) == {"str"}

    def test_str_regex_excludes_slash(self) -> None:
        pattern, _ = CONVERTERS["str"]
        assert pattern == r"[^/]+"


class TestConvertParam:
    def test_str_passthrough(self) -> None:
        assert convert_param("acme", "str") == "acme"

    def test_str_is_percent_decoded(self) -> None:
        assert convert_param("level%20hq", "str") == "level hq"

    def test_encoded_slash_decoded(self) -> None:
        assert convert_param("a%2Fb", "str") == "a/b"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(KeyError):
            convert_param("x", "int")

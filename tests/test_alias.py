"""Tests for wayfinder.routing.alias — Alias value object."""

import pytest

from wayfinder.errors import InvalidAliasError, RouterError
from wayfinder.routing.alias import Alias


class TestAlias:
    def test_creation(self) -> None:
        alias = Alias("/path/to/contact", "/ptc")

        assert alias.path == "/path/to/contact"
        assert alias.alias == "/ptc"
        assert alias.is_forced is False
        assert alias.source is None

    def test_forced(self) -> None:
        alias = Alias("/path", "/p", is_forced=True, source="routes.json")

        assert alias.is_forced is True
        assert alias.source == "routes.json"

    @pytest.mark.parametrize(("path", "short"), [("", "/a"), ("/p", ""), (None, "/a"), ("/p", None)])
    def test_empty_rejected(self, path: object, short: object) -> None:
        with pytest.raises(InvalidAliasError):
            Alias(path, short)  # type: ignore[arg-type]

    def test_error_is_router_error(self) -> None:
        assert issubclass(InvalidAliasError, RouterError)


class TestAliasMutation:
    def test_fields_can_change(self) -> None:
        alias = Alias("/path/to/contact", "/ptc")
        alias.path = "/contact"
        alias.alias = "/c"
        alias.is_forced = True

        assert alias == Alias("/contact", "/c", is_forced=True)

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_empty_alias_rejected(self, value: object) -> None:
        alias = Alias("/path/to/contact", "/ptc")

        with pytest.raises(InvalidAliasError, match="alias"):
            alias.alias = value  # type: ignore[assignment]
        assert alias.alias == "/ptc"

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_empty_path_rejected(self, value: object) -> None:
        alias = Alias("/path/to/contact", "/ptc")

        with pytest.raises(InvalidAliasError, match="path"):
            alias.path = value  # type: ignore[assignment]
        assert alias.path == "/path/to/contact"

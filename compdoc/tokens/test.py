"""Tests for style token resolution."""

import pytest

from .lib import Style, StyleRegistry, TokenResolver


class CountingLookup:
    """Lookup that records every requested id."""

    def __init__(self, styles: dict[str, str]):
        self.requested: list[str] = []
        self._registry = StyleRegistry(styles)

    def get_style(self, style_id):
        self.requested.append(style_id)
        return self._registry.get_style(style_id)


class TestStyleRegistry:
    """Tests for the dict-backed registry."""

    @pytest.mark.unit
    def test_register_and_get(self):
        """Registered styles are returned by id."""
        registry = StyleRegistry()
        registry.register("S:1", "Text/Body")
        assert registry.get_style("S:1") == Style(id="S:1", name="Text/Body")
        assert len(registry) == 1

    @pytest.mark.unit
    def test_unknown_id(self):
        """Unknown ids return None."""
        assert StyleRegistry({"S:1": "A"}).get_style("S:2") is None


class TestTokenResolver:
    """Tests for TokenResolver.resolve."""

    @pytest.mark.unit
    def test_resolves_name(self):
        """Known reference resolves to the style name."""
        resolver = TokenResolver(StyleRegistry({"S:1": "Color/Primary"}))
        assert resolver.resolve("S:1") == "Color/Primary"

    @pytest.mark.unit
    def test_unknown_reference(self):
        """Lookup miss resolves to None."""
        resolver = TokenResolver(StyleRegistry())
        assert resolver.resolve("S:404") is None

    @pytest.mark.unit
    @pytest.mark.parametrize("ref", [None, ""])
    def test_empty_reference_skips_lookup(self, ref):
        """Empty references never reach the lookup."""
        lookup = CountingLookup({"": "never"})
        assert TokenResolver(lookup).resolve(ref) is None
        assert lookup.requested == []

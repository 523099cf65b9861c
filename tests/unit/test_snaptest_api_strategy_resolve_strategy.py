"""Unit tests for snaptest.api.strategy.resolve_strategy."""

import pytest

from snaptest.api.strategy import STRATEGIES, UnsupportedCapabilityError, lines, resolve_strategy

pytestmark = pytest.mark.unit


class TestResolveStrategy:
    @pytest.mark.parametrize("capability", ["data", "description", "dump", "image", "json", "lines", "plist", "raw"])
    def test_builtin_capabilities(self, capability):
        strategy = resolve_strategy(capability)
        assert strategy is STRATEGIES[capability]

    def test_override_wins(self):
        custom = lines().pullback(str, name="custom")
        assert resolve_strategy("dump", override=custom) is custom

    def test_strategy_passes_through(self):
        custom = lines()
        assert resolve_strategy(custom) is custom

    def test_unknown_capability(self):
        with pytest.raises(UnsupportedCapabilityError) as excinfo:
            resolve_strategy("video")

        assert excinfo.value.capability == "video"
        assert "known: data, description, dump, image, json, lines, plist, raw" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)

    def test_non_string_capability(self):
        with pytest.raises(UnsupportedCapabilityError):
            resolve_strategy(42)  # type: ignore[arg-type]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            STRATEGIES["custom"] = lines()  # type: ignore[index]

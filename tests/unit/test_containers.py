"""Tests for Properties, Measurements and ContextTags containers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from insightspy.core.containers import Measurements, Properties
from insightspy.core.tags import ContextTags

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]

_keys = st.text(min_size=1, max_size=20)
_string_maps = st.dictionaries(_keys, st.text(max_size=20), max_size=10)
_float_maps = st.dictionaries(
    _keys, st.floats(allow_nan=False, allow_infinity=False), max_size=10
)


class TestCombine:
    """Tests for the right-biased combine operation."""

    @pytest.mark.tra("Core.Containers.Combine.OverlayWins")
    def test_overlay_wins_on_collision(self) -> None:
        """Overlay value replaces base value for the same key."""
        base = Properties({"test": "ok", "no-write": "fail"})
        overlay = Properties({"no-write": "ok"})

        merged = Properties.combine(base, overlay)

        assert merged == {"test": "ok", "no-write": "ok"}

    @pytest.mark.tra("Core.Containers.Combine.Pure")
    def test_combine_does_not_mutate_operands(self) -> None:
        """Neither base nor overlay is changed by combine."""
        base = ContextTags({"a": "1"})
        overlay = ContextTags({"a": "2", "b": "3"})

        ContextTags.combine(base, overlay)

        assert base == {"a": "1"}
        assert overlay == {"a": "2", "b": "3"}

    @pytest.mark.tra("Core.Containers.Combine.Type")
    def test_combine_returns_same_container_class(self) -> None:
        """combine on a container class returns an instance of that class."""
        merged = Measurements.combine(Measurements(), {"latency": 200.0})

        assert isinstance(merged, Measurements)
        assert merged == {"latency": 200.0}

    @pytest.mark.tra("Core.Containers.Combine.Empty")
    def test_combine_two_empty_containers(self) -> None:
        """Two empty containers combine to an empty container."""
        assert ContextTags.combine(ContextTags(), ContextTags()) == {}

    @pytest.mark.tra("Core.Containers.Combine.RightBias")
    @given(base=_string_maps, overlay=_string_maps)
    def test_right_bias_property(
        self, base: dict[str, str], overlay: dict[str, str]
    ) -> None:
        """Every overlay key takes overlay's value; other base keys survive."""
        merged = Properties.combine(base, overlay)

        for key, value in overlay.items():
            assert merged[key] == value
        for key in base.keys() - overlay.keys():
            assert merged[key] == base[key]
        assert merged.keys() == base.keys() | overlay.keys()

    @pytest.mark.tra("Core.Containers.Combine.Identity")
    @given(values=_float_maps)
    def test_empty_operand_is_identity(self, values: dict[str, float]) -> None:
        """Combining with an empty container on either side is identity."""
        assert Measurements.combine(values, Measurements()) == values
        assert Measurements.combine(Measurements(), values) == values


class TestContainerCopy:
    """Tests for container copy and repr."""

    @pytest.mark.tra("Core.Containers.Copy")
    def test_copy_is_independent(self) -> None:
        """copy() returns a container of the same class that can diverge."""
        original = Properties({"a": "1"})
        copied = original.copy()
        copied["a"] = "2"

        assert isinstance(copied, Properties)
        assert original["a"] == "1"

    @pytest.mark.tra("Core.Containers.Repr")
    def test_repr_names_container_class(self) -> None:
        """repr shows the container class name."""
        assert repr(Properties({"a": "1"})) == "Properties({'a': '1'})"

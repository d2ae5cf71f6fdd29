"""Tests for vector value types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rangeprim.data.vectors import Vector2, Vector2Int, Vector3, Vector3Int


class TestConstruction:
    """Test vector construction."""

    def test_defaults_to_zero(self) -> None:
        """Test that omitted components are zero."""
        assert Vector2().axes == (0.0, 0.0)
        assert Vector3Int().axes == (0, 0, 0)

    def test_positional_and_keyword(self) -> None:
        """Test that positional and keyword construction agree."""
        assert Vector3(1, 2, 3) == Vector3(x=1, y=2, z=3)

    def test_float_vector_coerces_ints(self) -> None:
        """Test that floating vectors store float components."""
        v = Vector2(1, 2)
        assert isinstance(v.x, float)
        assert v.axes == (1.0, 2.0)

    def test_int_vector_rejects_fractional_components(self) -> None:
        """Test that integer vectors reject non-integral values."""
        with pytest.raises(ValidationError):
            Vector2Int(1.5, 0)

    def test_forbids_extra_fields(self) -> None:
        """Test that unknown components are rejected."""
        with pytest.raises(ValidationError):
            Vector2(1, 2, z=3)

    def test_is_frozen(self) -> None:
        """Test that components cannot be reassigned."""
        v = Vector2Int(1, 2)
        with pytest.raises(ValidationError):
            v.x = 5  # type: ignore[misc]

    def test_hashable(self) -> None:
        """Test that equal vectors hash equally."""
        assert len({Vector2Int(1, 2), Vector2Int(1, 2), Vector2Int(2, 1)}) == 2


class TestAxes:
    """Test axis access and reconstruction."""

    def test_axis_names(self) -> None:
        """Test the per-axis field names."""
        assert Vector2.AXES == ("x", "y")
        assert Vector3Int.AXES == ("x", "y", "z")

    def test_from_axes(self) -> None:
        """Test rebuilding a vector from components."""
        assert Vector3Int.from_axes([4, 5, 6]) == Vector3Int(4, 5, 6)

    def test_from_axes_wrong_count(self) -> None:
        """Test that a component count mismatch raises ValueError."""
        with pytest.raises(ValueError, match="takes 2 components"):
            Vector2.from_axes([1, 2, 3])

    def test_floating_counterparts(self) -> None:
        """Test the integer to floating mapping."""
        assert Vector2Int.floating is Vector2
        assert Vector2.floating is Vector2
        assert Vector3Int.floating is Vector3
        assert Vector3.floating is Vector3

    def test_is_integral(self) -> None:
        """Test integer vector detection."""
        assert Vector2Int.is_integral()
        assert not Vector3.is_integral()

    def test_str(self) -> None:
        """Test the tuple-like string form."""
        assert str(Vector2Int(10, -100)) == "(10, -100)"
        assert str(Vector3(1, 2.5, 0)) == "(1.0, 2.5, 0.0)"

    def test_model_dump_uses_axis_names(self) -> None:
        """Test that serialization exposes x/y/z fields."""
        assert Vector3Int(1, 2, 3).model_dump() == {"x": 1, "y": 2, "z": 3}

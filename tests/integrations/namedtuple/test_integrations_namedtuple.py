"""Tests for NamedTuple synthesis."""

import collections
from typing import NamedTuple

from defaultwire.synthesizer import Synthesizer


class Point(NamedTuple):
    x: int
    y: int


class Segment(NamedTuple):
    start: Point
    end: Point
    label: str = "segment"


class EmptyNamedTuple(NamedTuple):
    pass


LegacyPair = collections.namedtuple("LegacyPair", ["left", "right"])


class TestNamedTupleSynthesis:
    def test_nested_namedtuple(self, synthesizer: Synthesizer) -> None:
        """Annotated fields are synthesized and defaults are kept."""
        result = synthesizer.get_default(Segment)

        assert result == Segment(Point(0, 0), Point(0, 0), "segment")
        assert result is not None
        assert result.label == "segment"

    def test_empty_namedtuple(self, synthesizer: Synthesizer) -> None:
        assert synthesizer.get_default(EmptyNamedTuple) == EmptyNamedTuple()

    def test_untyped_namedtuple_has_no_default(self, synthesizer: Synthesizer) -> None:
        """collections.namedtuple fields carry no annotations."""
        assert synthesizer.get_default(LegacyPair) is None

    def test_subtype_instantiation(self, subtype_synthesizer: Synthesizer) -> None:
        result = subtype_synthesizer.get_default(Segment)

        assert isinstance(result, Segment)
        assert type(result).__name__ == "SegmentPlaceholder"
        assert result == (Point(0, 0), Point(0, 0), "segment")

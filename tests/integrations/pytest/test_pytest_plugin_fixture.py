from dataclasses import dataclass
from typing import Optional

import pytest

from defaultwire.instantiation import DirectInstantiation, SubtypeInstantiation
from defaultwire.synthesizer import Synthesizer


@dataclass
class _Leaf:
    value: int


@dataclass
class _Branch:
    leaf: _Leaf


@dataclass
class _Holder:
    branch: _Branch
    note: Optional[str]


def test_fixture_provides_default_synthesizer(defaultwire_synthesizer: Synthesizer) -> None:
    assert isinstance(defaultwire_synthesizer, Synthesizer)
    assert defaultwire_synthesizer.recursion_ceiling == 20
    assert defaultwire_synthesizer.non_null is False
    assert isinstance(defaultwire_synthesizer.instantiation, DirectInstantiation)
    assert defaultwire_synthesizer.get_default(_Holder) == _Holder(_Branch(_Leaf(0)), None)


@pytest.mark.defaultwire(recursion_ceiling=1)
def test_marker_sets_recursion_ceiling(defaultwire_synthesizer: Synthesizer) -> None:
    assert defaultwire_synthesizer.recursion_ceiling == 1
    assert defaultwire_synthesizer.get_default(_Branch) == _Branch(None)  # type: ignore[arg-type]


@pytest.mark.defaultwire(recursion_ceiling=1, non_null=True)
def test_marker_sets_non_null(defaultwire_synthesizer: Synthesizer) -> None:
    assert defaultwire_synthesizer.non_null is True
    assert defaultwire_synthesizer.get_default(_Branch) is None


@pytest.mark.defaultwire(subtypes=True)
def test_marker_enables_subtype_instantiation(defaultwire_synthesizer: Synthesizer) -> None:
    assert isinstance(defaultwire_synthesizer.instantiation, SubtypeInstantiation)
    assert type(defaultwire_synthesizer.get_default(_Leaf)).__name__ == "_LeafPlaceholder"


def test_fixture_is_function_scoped(defaultwire_synthesizer: Synthesizer) -> None:
    """Configuration changes made by earlier tests do not leak."""
    defaultwire_synthesizer.set_recursion_ceiling(3)

    assert defaultwire_synthesizer.recursion_ceiling == 3


def test_fixture_starts_fresh_after_change(defaultwire_synthesizer: Synthesizer) -> None:
    assert defaultwire_synthesizer.recursion_ceiling == 20

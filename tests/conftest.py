"""Shared pytest fixtures for defaultwire tests."""

import pytest

from defaultwire.constructors import ConstructorSelector
from defaultwire.instantiation import SubtypeInstantiation
from defaultwire.synthesizer import Synthesizer, create_synthesizer


@pytest.fixture()
def synthesizer() -> Synthesizer:
    """Synthesizer with the standard provider chain and direct instantiation."""
    return create_synthesizer()


@pytest.fixture()
def non_null_synthesizer() -> Synthesizer:
    """Synthesizer that refuses to pass None for missing parameters."""
    return create_synthesizer(non_null=True)


@pytest.fixture()
def subtype_synthesizer(synthesizer: Synthesizer) -> Synthesizer:
    """Synthesizer derived from the default one, using subtype instantiation."""
    return synthesizer.with_instantiation_strategy(SubtypeInstantiation())


@pytest.fixture()
def selector() -> ConstructorSelector:
    """ConstructorSelector instance."""
    return ConstructorSelector()

from __future__ import annotations

from typing import Any

import pytest

from defaultwire.defaults import DEFAULT_RECURSION_CEILING
from defaultwire.instantiation import SubtypeInstantiation
from defaultwire.synthesizer import Synthesizer, create_synthesizer

_MARKER_NAME = "defaultwire"
_MARKER_OPTIONS = frozenset({"recursion_ceiling", "non_null", "subtypes"})


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``defaultwire`` marker."""
    config.addinivalue_line(
        "markers",
        f"{_MARKER_NAME}(recursion_ceiling=20, non_null=False, subtypes=False): "
        "configure the defaultwire_synthesizer fixture for this test.",
    )


@pytest.fixture()
def defaultwire_synthesizer(request: pytest.FixtureRequest) -> Synthesizer:
    """Create a per-test synthesizer with the standard provider chain.

    The fixture is function-scoped, so configuration changes are isolated
    between tests. Use ``@pytest.mark.defaultwire(...)`` to set the recursion
    ceiling, enable non-null mode, or switch to subtype instantiation
    (``subtypes=True``).

    Returns:
        A new ``Synthesizer`` instance.

    """
    options = _marker_options(request)
    synthesizer = create_synthesizer(
        recursion_ceiling=options.get("recursion_ceiling", DEFAULT_RECURSION_CEILING),
        non_null=options.get("non_null", False),
    )
    if options.get("subtypes", False):
        return synthesizer.with_instantiation_strategy(SubtypeInstantiation())
    return synthesizer


def _marker_options(request: pytest.FixtureRequest) -> dict[str, Any]:
    marker = request.node.get_closest_marker(_MARKER_NAME)
    if marker is None:
        return {}
    unknown = set(marker.kwargs) - _MARKER_OPTIONS
    if unknown or marker.args:
        names = ", ".join(sorted(unknown)) or "positional arguments"
        msg = f"Unsupported options for @pytest.mark.{_MARKER_NAME}: {names}"
        raise pytest.UsageError(msg)
    return dict(marker.kwargs)

"""Tests for constructor candidate enumeration and minimal selection."""

import logging
from typing import Optional, Union

import pytest
from typing_extensions import Self

from defaultwire.constructors import ConstructorKind, ConstructorSelector
from defaultwire.markers import alternate_constructor


class _Wide:
    def __init__(self, a: int, b: str, c: float) -> None:
        self.values = (a, b, c)

    @alternate_constructor
    def from_pair(cls, a: int, b: str) -> Self:
        return cls(a, b, 0.0)

    @alternate_constructor
    def from_first(cls, a: int) -> Self:
        return cls(a, "", 0.0)

    @alternate_constructor
    def from_label(cls, b: str) -> Self:
        return cls(0, b, 0.0)


class _Optional:
    def __init__(self, a: int, b: str = "b", *args: int, c: float = 1.0, **kwargs: str) -> None:
        self.a = a


class _Recursive:
    def __init__(self, parent: "_Recursive") -> None:
        self.parent = parent

    @alternate_constructor
    def copy_of(cls, other: Self) -> Self:
        return cls(other.parent)


class _RecursiveWithEscape(_Recursive):
    @alternate_constructor
    def orphan(cls) -> Self:
        instance = object.__new__(cls)
        instance.parent = None  # type: ignore[assignment]
        return instance


class _Unannotated:
    def __init__(self, value) -> None:  # type: ignore[no-untyped-def]  # noqa: ANN001
        self.value = value

    @alternate_constructor
    def default(cls, flag: bool) -> Self:
        return cls(flag)


class _Base:
    def __init__(self, a: int, b: int) -> None:
        self.total = a + b

    @alternate_constructor
    def single(cls, a: int) -> Self:
        return cls(a, 0)


class _Shadowing(_Base):
    def single(self) -> int:  # type: ignore[override]
        return 1


class _Inheriting(_Base):
    pass


class _LinkedNode:
    def __init__(self, next_node: Optional["_LinkedNode"]) -> None:
        self.next_node = next_node


class _PositionalOnly:
    def __init__(self, first: int, /, second: str) -> None:
        self.first = first
        self.second = second


class TestIterCandidates:
    def test_class_call_first_then_alternates_in_definition_order(
        self,
        selector: ConstructorSelector,
    ) -> None:
        """Enumeration order is deterministic."""
        names = [candidate.name for candidate in selector.iter_candidates(_Wide)]

        assert names == [
            "_Wide()",
            "_Wide.from_pair()",
            "_Wide.from_first()",
            "_Wide.from_label()",
        ]

    def test_only_required_parameters_count(self, selector: ConstructorSelector) -> None:
        """Defaults and variadic parameters are left to the callee."""
        (candidate,) = selector.iter_candidates(_Optional)

        assert candidate.kind is ConstructorKind.INIT
        assert [parameter.name for parameter in candidate.parameters] == ["a"]
        assert candidate.parameter_types == (int,)
        assert candidate.arity == 1

    def test_self_annotations_resolve_to_target(self, selector: ConstructorSelector) -> None:
        candidates = list(selector.iter_candidates(_Recursive))

        assert [candidate.parameter_types for candidate in candidates] == [(_Recursive,), (_Recursive,)]

    def test_unresolvable_annotation_skips_candidate(
        self,
        selector: ConstructorSelector,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A parameter without a usable annotation disqualifies its constructor only."""
        with caplog.at_level(logging.DEBUG, logger="defaultwire.constructors"):
            candidates = list(selector.iter_candidates(_Unannotated))

        assert [candidate.name for candidate in candidates] == ["_Unannotated.default()"]
        assert any("no resolvable annotation" in record.getMessage() for record in caplog.records)

    def test_inherited_alternates_are_found(self, selector: ConstructorSelector) -> None:
        names = [candidate.name for candidate in selector.iter_candidates(_Inheriting)]

        assert names == ["_Inheriting()", "_Inheriting.single()"]

    def test_subclass_can_shadow_alternate_constructor(self, selector: ConstructorSelector) -> None:
        """A plain method overriding a marked classmethod removes it."""
        names = [candidate.name for candidate in selector.iter_candidates(_Shadowing)]

        assert names == ["_Shadowing()"]

    def test_union_members_become_passthrough_candidates(
        self,
        selector: ConstructorSelector,
    ) -> None:
        candidates = list(selector.iter_candidates(Union[int, str, None]))

        assert [candidate.kind for candidate in candidates] == [ConstructorKind.PASSTHROUGH] * 3
        assert [candidate.parameter_types for candidate in candidates] == [(int,), (str,), ()]
        assert candidates[0].invoke((5,)) == 5
        assert candidates[2].invoke(()) is None

    def test_fixed_tuple_packs_members(self, selector: ConstructorSelector) -> None:
        (candidate,) = selector.iter_candidates(tuple[int, str])

        assert candidate.kind is ConstructorKind.PASSTHROUGH
        assert candidate.parameter_types == (int, str)
        assert candidate.invoke((1, "a")) == (1, "a")

    @pytest.mark.parametrize("target", [list[int], "NotAType", 42])
    def test_non_class_descriptors_have_no_candidates(
        self,
        selector: ConstructorSelector,
        target: object,
    ) -> None:
        assert list(selector.iter_candidates(target)) == []


class TestSelectMinimal:
    def test_picks_fewest_required_parameters(self, selector: ConstructorSelector) -> None:
        candidate = selector.select_minimal(_Wide)

        assert candidate is not None
        assert candidate.name == "_Wide.from_first()"

    def test_ties_keep_first_candidate(self, selector: ConstructorSelector) -> None:
        """from_first and from_label both need one parameter; from_first comes first."""
        candidate = selector.select_minimal(_Wide)

        assert candidate is not None
        assert candidate.arity == 1
        assert candidate.parameter_types == (int,)

    def test_stops_at_zero_arity_candidate(self, selector: ConstructorSelector) -> None:
        candidate = selector.select_minimal(Optional[_Wide])

        assert candidate is not None
        assert candidate.arity == 0
        assert candidate.invoke(()) is None

    def test_self_referencing_constructors_are_rejected(
        self,
        selector: ConstructorSelector,
    ) -> None:
        """Constructors taking the target itself can never be satisfied."""
        assert selector.select_minimal(_Recursive) is None

    def test_escape_hatch_is_selected_for_recursive_subclass(
        self,
        selector: ConstructorSelector,
    ) -> None:
        candidate = selector.select_minimal(_RecursiveWithEscape)

        assert candidate is not None
        assert candidate.name == "_RecursiveWithEscape.orphan()"

    def test_optional_self_reference_is_allowed(self, selector: ConstructorSelector) -> None:
        """Only direct self references are rejected."""
        candidate = selector.select_minimal(_LinkedNode)

        assert candidate is not None
        assert candidate.parameter_types == (Optional[_LinkedNode],)


class TestConstructorCandidate:
    def test_bind_respects_parameter_kinds(self, selector: ConstructorSelector) -> None:
        candidate = selector.select_minimal(_PositionalOnly)
        assert candidate is not None

        args, kwargs = candidate.bind((1, "two"))

        assert args == [1]
        assert kwargs == {"second": "two"}

    def test_bind_rejects_wrong_argument_count(self, selector: ConstructorSelector) -> None:
        candidate = selector.select_minimal(_PositionalOnly)
        assert candidate is not None

        with pytest.raises(ValueError):
            candidate.bind((1,))

    def test_requires(self, selector: ConstructorSelector) -> None:
        (init, _) = selector.iter_candidates(_Recursive)

        assert init.requires(_Recursive)
        assert not init.requires(int)

    def test_repr(self, selector: ConstructorSelector) -> None:
        candidate = selector.select_minimal(_Optional)

        assert repr(candidate) == "<ConstructorCandidate _Optional() arity=1>"

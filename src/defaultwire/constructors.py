from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from inspect import Parameter
from typing import Any, get_args, get_type_hints

import typing_extensions

from defaultwire._internal.type_checks import (
    is_fixed_tuple,
    is_runtime_class,
    is_union,
    unwrap_annotated,
)
from defaultwire.markers import is_alternate_constructor
from defaultwire.types import TypeDescriptor

logger = logging.getLogger(__name__)

_MISSING_ANNOTATION: Any = object()
_SELF_TYPES: tuple[Any, ...] = tuple({typing_extensions.Self, getattr(typing, "Self", None)} - {None})


class ConstructorKind(Enum):
    """How a constructor candidate produces its value."""

    INIT = "init"
    """Calling the class itself, which runs ``__new__`` and ``__init__``."""

    CLASSMETHOD = "classmethod"
    """A classmethod marked with ``alternate_constructor``."""

    PASSTHROUGH = "passthrough"
    """A structural pseudo-constructor for unions and fixed tuples."""


@dataclass(frozen=True, slots=True)
class ConstructorCandidate:
    """A constructor considered for synthesis, with its required parameters.

    Only parameters without defaults are listed. Optional parameters and
    ``*args``/``**kwargs`` are left to the callee.
    """

    target: TypeDescriptor
    factory: Callable[..., Any]
    kind: ConstructorKind
    parameters: tuple[Parameter, ...]
    parameter_types: tuple[Any, ...]
    name: str

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def requires(self, target: TypeDescriptor) -> bool:
        """Return true when ``target`` itself is one of the parameter types."""
        return any(unwrap_annotated(parameter_type) == target for parameter_type in self.parameter_types)

    def bind(self, arguments: Sequence[Any]) -> tuple[list[Any], dict[str, Any]]:
        """Split ``arguments`` into positional and keyword arguments for the factory."""
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter, argument in zip(self.parameters, arguments, strict=True):
            if parameter.kind is Parameter.POSITIONAL_ONLY:
                args.append(argument)
            else:
                kwargs[parameter.name] = argument
        return args, kwargs

    def invoke(self, arguments: Sequence[Any]) -> Any:
        args, kwargs = self.bind(arguments)
        return self.factory(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<ConstructorCandidate {self.name} arity={self.arity}>"


class ConstructorSelector:
    """Enumerate constructor candidates and pick the cheapest usable one.

    Enumeration order is deterministic: the class call signature first, then
    marked alternate constructors in MRO and definition order. Ties on arity keep the
    first candidate seen in that order.
    """

    def iter_candidates(self, target: TypeDescriptor) -> Iterator[ConstructorCandidate]:
        """Yield every constructor candidate for ``target`` in enumeration order.

        Candidates with a required parameter whose type cannot be resolved are
        skipped.
        """
        if is_union(target):
            yield from self._union_candidates(target)
            return
        if is_fixed_tuple(target):
            yield self._tuple_candidate(target)
            return
        if not is_runtime_class(target):
            return

        init_candidate = self._class_call_candidate(target)
        if init_candidate is not None:
            yield init_candidate
        yield from self._classmethod_candidates(target)

    def select_minimal(self, target: TypeDescriptor) -> ConstructorCandidate | None:
        """Return the candidate with the fewest required parameters, or None.

        Candidates that take ``target`` itself as a parameter are rejected.
        Stops at the first zero-arity candidate.
        """
        minimum: ConstructorCandidate | None = None
        for candidate in self.iter_candidates(target):
            if minimum is not None and candidate.arity >= minimum.arity:
                continue
            if candidate.requires(target):
                logger.debug("Rejecting self-referencing constructor %r", candidate)
                continue

            minimum = candidate
            if minimum.arity == 0:
                break
        return minimum

    def _class_call_candidate(self, target: type[Any]) -> ConstructorCandidate | None:
        try:
            signature = inspect.signature(target)
        except (TypeError, ValueError):
            logger.debug("Cannot inspect call signature of %r", target)
            return None

        annotations = self._merged_type_hints(
            getattr(target, "__init__", None),
            getattr(target, "__new__", None),
        )
        return self._build_candidate(
            target=target,
            factory=target,
            kind=ConstructorKind.INIT,
            parameters=tuple(signature.parameters.values()),
            annotations=annotations,
            name=f"{target.__qualname__}()",
        )

    def _classmethod_candidates(self, target: type[Any]) -> Iterator[ConstructorCandidate]:
        seen: set[str] = set()
        for klass in target.__mro__:
            if klass is object:
                continue
            for name, attribute in list(vars(klass).items()):
                if name in seen:
                    continue
                seen.add(name)
                if not is_alternate_constructor(attribute):
                    continue

                bound = getattr(target, name)
                annotations = self._merged_type_hints(bound)
                try:
                    signature = inspect.signature(bound)
                except (TypeError, ValueError):
                    continue

                candidate = self._build_candidate(
                    target=target,
                    factory=bound,
                    kind=ConstructorKind.CLASSMETHOD,
                    parameters=tuple(signature.parameters.values()),
                    annotations=annotations,
                    name=f"{target.__qualname__}.{name}()",
                )
                if candidate is not None:
                    yield candidate

    def _union_candidates(self, target: TypeDescriptor) -> Iterator[ConstructorCandidate]:
        for member in get_args(target):
            if member is type(None):
                yield ConstructorCandidate(
                    target=target,
                    factory=_none,
                    kind=ConstructorKind.PASSTHROUGH,
                    parameters=(),
                    parameter_types=(),
                    name=f"{target!r} -> None",
                )
                continue
            yield ConstructorCandidate(
                target=target,
                factory=_passthrough,
                kind=ConstructorKind.PASSTHROUGH,
                parameters=(Parameter("value", Parameter.POSITIONAL_ONLY, annotation=member),),
                parameter_types=(member,),
                name=f"{target!r} -> {member!r}",
            )

    def _tuple_candidate(self, target: TypeDescriptor) -> ConstructorCandidate:
        members = get_args(target)
        return ConstructorCandidate(
            target=target,
            factory=_pack_tuple,
            kind=ConstructorKind.PASSTHROUGH,
            parameters=tuple(
                Parameter(f"item_{index}", Parameter.POSITIONAL_ONLY, annotation=member)
                for index, member in enumerate(members)
            ),
            parameter_types=members,
            name=f"{target!r}",
        )

    def _build_candidate(  # noqa: PLR0913
        self,
        *,
        target: type[Any],
        factory: Callable[..., Any],
        kind: ConstructorKind,
        parameters: tuple[Parameter, ...],
        annotations: dict[str, Any],
        name: str,
    ) -> ConstructorCandidate | None:
        required: list[Parameter] = []
        parameter_types: list[Any] = []
        for parameter in parameters:
            if not _is_required_parameter(parameter):
                continue
            annotation = self._resolve_parameter_annotation(parameter, annotations)
            if annotation is _MISSING_ANNOTATION:
                logger.debug(
                    "Skipping constructor %s: parameter '%s' has no resolvable annotation",
                    name,
                    parameter.name,
                )
                return None
            required.append(parameter)
            parameter_types.append(target if annotation in _SELF_TYPES else annotation)

        return ConstructorCandidate(
            target=target,
            factory=factory,
            kind=kind,
            parameters=tuple(required),
            parameter_types=tuple(parameter_types),
            name=name,
        )

    def _resolve_parameter_annotation(self, parameter: Parameter, annotations: dict[str, Any]) -> Any:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is not _MISSING_ANNOTATION:
            return annotation

        raw_annotation = parameter.annotation
        if raw_annotation is not Parameter.empty and not isinstance(raw_annotation, str):
            return raw_annotation
        return _MISSING_ANNOTATION

    def _merged_type_hints(self, *callables: Any) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for callable_obj in reversed(callables):
            if callable_obj is None or callable_obj in (object.__init__, object.__new__):
                continue
            try:
                merged.update(get_type_hints(callable_obj, include_extras=True))
            except (AttributeError, NameError, SyntaxError, TypeError):
                continue
        return merged


def _is_required_parameter(parameter: Parameter) -> bool:
    return (
        parameter.default is Parameter.empty
        and parameter.kind is not Parameter.VAR_POSITIONAL
        and parameter.kind is not Parameter.VAR_KEYWORD
    )


def _none() -> None:
    return None


def _passthrough(value: Any, /) -> Any:
    return value


def _pack_tuple(*items: Any) -> tuple[Any, ...]:
    return items


__all__ = ["ConstructorCandidate", "ConstructorKind", "ConstructorSelector"]

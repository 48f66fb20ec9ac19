from __future__ import annotations

import inspect
import threading
import types
from collections.abc import Sequence
from typing import Any, Protocol

from defaultwire._internal.type_checks import is_runtime_class
from defaultwire.constructors import ConstructorCandidate, ConstructorKind
from defaultwire.types import TypeDescriptor

PLACEHOLDER_SUFFIX = "Placeholder"


class InstantiationStrategy(Protocol):
    """Final synthesis step turning a constructor and its arguments into an instance.

    Implementations may raise or return ``NO_DEFAULT``; the synthesizer folds
    both outcomes into "no default available".
    """

    def __call__(
        self,
        target: TypeDescriptor,
        constructor: ConstructorCandidate,
        parameter_types: Sequence[Any],
        arguments: Sequence[Any],
    ) -> Any: ...


class DirectInstantiation:
    """Invoke the selected constructor with the synthesized arguments."""

    def __call__(
        self,
        target: TypeDescriptor,
        constructor: ConstructorCandidate,
        parameter_types: Sequence[Any],
        arguments: Sequence[Any],
    ) -> Any:
        return constructor.invoke(arguments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SubtypeInstantiation:
    """Build an instance of a generated subclass without running the target's ``__init__``.

    The subclass is named ``<Target>Placeholder`` and is generated once per
    target, through the target's own metaclass. Abstract members are replaced by
    stubs raising ``NotImplementedError``, so abstract classes become
    instantiable. The instance is allocated with ``__new__`` and each argument
    is stored on it under its parameter name, bypassing ``__setattr__``
    overrides such as frozen dataclasses.

    Targets with a custom ``__new__`` (tuple subclasses such as ``NamedTuple``)
    receive the arguments through ``__new__`` instead. Unions and fixed tuples
    are not classes and are built directly.

    The generated-subclass cache is guarded by a lock and safe to share
    between threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subtypes: dict[type[Any], type[Any]] = {}

    def __call__(
        self,
        target: TypeDescriptor,
        constructor: ConstructorCandidate,
        parameter_types: Sequence[Any],
        arguments: Sequence[Any],
    ) -> Any:
        if constructor.kind is ConstructorKind.PASSTHROUGH or not is_runtime_class(target):
            return constructor.invoke(arguments)

        subtype = self.subtype_for(target)
        if target.__new__ is not object.__new__:
            if constructor.kind is not ConstructorKind.INIT:
                msg = f"Cannot allocate {target.__qualname__} through {constructor.name}: custom __new__"
                raise TypeError(msg)
            args, kwargs = constructor.bind(arguments)
            return target.__new__(subtype, *args, **kwargs)

        instance = object.__new__(subtype)
        for parameter, argument in zip(constructor.parameters, arguments, strict=True):
            object.__setattr__(instance, parameter.name, argument)
        return instance

    def subtype_for(self, target: type[Any]) -> type[Any]:
        """Return the generated placeholder subclass of ``target``."""
        with self._lock:
            subtype = self._subtypes.get(target)
            if subtype is None:
                subtype = _generate_subtype(target)
                self._subtypes[target] = subtype
            return subtype

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _generate_subtype(target: type[Any]) -> type[Any]:
    if getattr(target, "__final__", False):
        msg = f"Cannot generate a subtype of final class {target.__qualname__}"
        raise TypeError(msg)

    stubs: dict[str, Any] = {}
    for name in getattr(target, "__abstractmethods__", ()):
        stub = _abstract_stub(target, name)
        if isinstance(inspect.getattr_static(target, name, None), property):
            stubs[name] = property(stub)
        else:
            stubs[name] = stub

    def exec_body(namespace: dict[str, Any]) -> None:
        namespace["__module__"] = target.__module__
        namespace["__qualname__"] = f"{target.__qualname__}{PLACEHOLDER_SUFFIX}"
        namespace["__doc__"] = target.__doc__
        namespace.update(stubs)

    return types.new_class(f"{target.__name__}{PLACEHOLDER_SUFFIX}", (target,), exec_body=exec_body)


def _abstract_stub(target: type[Any], name: str) -> Any:
    def stub(self: Any, *args: Any, **kwargs: Any) -> Any:
        msg = f"{target.__qualname__}.{name} is abstract and has no placeholder implementation"
        raise NotImplementedError(msg)

    stub.__name__ = name
    stub.__qualname__ = f"{target.__qualname__}{PLACEHOLDER_SUFFIX}.{name}"
    return stub


__all__ = ["DirectInstantiation", "InstantiationStrategy", "SubtypeInstantiation"]

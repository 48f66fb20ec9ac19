import collections
import collections.abc
import datetime
import decimal
import fractions
import uuid
from collections.abc import Callable
from typing import Any

DEFAULT_RECURSION_CEILING = 20
"""Maximum composite nesting depth before synthesis gives up."""

DEFAULT_SCALAR_FACTORIES: dict[type[Any], Callable[[], Any]] = {
    bool: lambda: False,
    int: lambda: 0,
    float: lambda: 0.0,
    complex: lambda: 0j,
    str: lambda: "",
    bytes: lambda: b"",
    bytearray: bytearray,
    decimal.Decimal: decimal.Decimal,
    fractions.Fraction: fractions.Fraction,
    datetime.datetime: lambda: datetime.datetime.min,
    datetime.date: lambda: datetime.date.min,
    datetime.time: lambda: datetime.time.min,
    datetime.timedelta: datetime.timedelta,
    uuid.UUID: lambda: uuid.UUID(int=0),
    type(None): lambda: None,
}
"""Zero values for scalar and value-object types, keyed by exact type."""

DEFAULT_CONCRETE_CONTAINERS: tuple[type[Any], ...] = (
    list,
    set,
    frozenset,
    dict,
    collections.deque,
    collections.OrderedDict,
    collections.defaultdict,
    collections.Counter,
)
"""Container classes instantiated empty by calling them without arguments."""

DEFAULT_CONTAINER_INTERFACES: dict[Any, type[Any]] = {
    collections.abc.Iterable: list,
    collections.abc.Collection: list,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
    collections.abc.Set: set,
    collections.abc.MutableSet: set,
    collections.abc.Mapping: dict,
    collections.abc.MutableMapping: dict,
}
"""Abstract container interfaces and the concrete empty container served for them."""

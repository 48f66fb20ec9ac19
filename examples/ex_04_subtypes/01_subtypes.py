"""Subtype instantiation: placeholders that never run constructors.

This module demonstrates:

1. ``with_instantiation_strategy`` deriving a synthesizer with the same settings.
2. Constructors with side effects are not executed.
3. Abstract classes become instantiable through generated stubs.
"""

from __future__ import annotations

import abc

from defaultwire import SubtypeInstantiation, create_synthesizer


class Connection:
    opened = 0

    def __init__(self, host: str, port: int) -> None:
        Connection.opened += 1
        self.host = host
        self.port = port


class Notifier(abc.ABC):
    def __init__(self, channel: str) -> None:
        self.channel = channel

    @abc.abstractmethod
    def send(self, message: str) -> None: ...


def main() -> None:
    synthesizer = create_synthesizer(recursion_ceiling=5)
    placeholders = synthesizer.with_instantiation_strategy(SubtypeInstantiation())
    print(f"ceiling={placeholders.recursion_ceiling}")  # => ceiling=5

    connection = placeholders.get_default(Connection)
    print(f"type={type(connection).__name__}")  # => type=ConnectionPlaceholder
    print(f"is_connection={isinstance(connection, Connection)}")  # => is_connection=True
    print(f"opened={Connection.opened}")  # => opened=0
    print(f"port={connection.port}")  # => port=0

    print(f"direct_notifier={synthesizer.get_default(Notifier)}")  # => direct_notifier=None
    notifier = placeholders.get_default(Notifier)
    try:
        notifier.send("hello")
    except NotImplementedError:
        print("send_is_stubbed=True")  # => send_is_stubbed=True


if __name__ == "__main__":
    main()

"""Basics: default values for scalars, containers and composite types.

This module demonstrates:

1. Zero values for scalars and the first member of an enum.
2. Empty concrete containers for container interfaces.
3. Recursive synthesis of a dataclass through its constructor.
4. ``get_default`` vs ``try_get_default`` for ``Optional`` targets.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from defaultwire import NO_DEFAULT, create_synthesizer


class Status(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass
class Author:
    name: str
    email: Optional[str]


@dataclass
class Article:
    title: str
    author: Author
    status: Status
    tags: Sequence[str]
    metadata: Mapping[str, str]


def main() -> None:
    synthesizer = create_synthesizer()

    print(f"int={synthesizer.get_default(int)!r}")  # => int=0
    print(f"str={synthesizer.get_default(str)!r}")  # => str=''
    print(f"status={synthesizer.get_default(Status)}")  # => status=Status.DRAFT
    print(f"sequence={synthesizer.get_default(Sequence[int])!r}")  # => sequence=[]

    article = synthesizer.get_default(Article)
    print(article)  # => Article(title='', author=Author(name='', email=None), status=<Status.DRAFT: 'draft'>, tags=[], metadata={})

    optional_default = synthesizer.try_get_default(Optional[Author])
    print(f"optional_is_none={optional_default is None}")  # => optional_is_none=True

    class Opaque:
        def __init__(self, handle) -> None:  # noqa: ANN001
            self.handle = handle

    print(f"opaque_absent={synthesizer.try_get_default(Opaque) is NO_DEFAULT}")  # => opaque_absent=True
    print(f"opaque_get_default={synthesizer.get_default(Opaque)}")  # => opaque_get_default=None


if __name__ == "__main__":
    main()

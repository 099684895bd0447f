"""Tag vocabularies.

A POS tag vocabulary is any type that provides a canonical short form per
tag, a distinguished wildcard ("unknown") tag and a way to read a tag back
from its form. Chunk vocabularies provide the form and the reader only.
Concrete vocabularies satisfy these protocols structurally; they do not
inherit from them.
"""
from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable


T = TypeVar("T", bound="Tag")
C = TypeVar("C", bound="ChunkTag")


@runtime_checkable
class Tag(Protocol):
    def canonical_form(self) -> str:
        ...

    @classmethod
    def unknown(cls):
        ...

    @classmethod
    def parse(cls, text: str):
        ...


@runtime_checkable
class ChunkTag(Protocol):
    def canonical_form(self) -> str:
        ...

    @classmethod
    def parse(cls, text: str):
        ...


def is_unknown(tag) -> bool:
    """True if `tag` is its vocabulary's wildcard."""
    return tag == type(tag).unknown()


@dataclass(frozen=True)
class RawTag:
    """A POS tag kept as the text it was read from."""

    text: str

    def canonical_form(self) -> str:
        return self.text

    @classmethod
    def unknown(cls) -> "RawTag":
        return cls("-")

    @classmethod
    def parse(cls, text: str) -> "RawTag":
        return cls(text)


@dataclass(frozen=True)
class RawChunk:
    text: str

    def canonical_form(self) -> str:
        return self.text

    @classmethod
    def parse(cls, text: str) -> "RawChunk":
        return cls(text)

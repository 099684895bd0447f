import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, Sequence, TypeVar, Union

from nlptree.config import DEFAULT_ALIGNMENT, AlignmentConfig
from nlptree.errors import LengthMismatch

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C")
A = TypeVar("A")
B = TypeVar("B")


def zip_aligned(
    left: Sequence[A],
    right: Sequence[B],
    config: Optional[AlignmentConfig] = None,
    what: str = "sequences",
) -> list[tuple[A, B]]:
    """Pair two sequences by position under the configured length policy."""
    config = config or DEFAULT_ALIGNMENT
    if len(left) != len(right):
        if config.strict:
            raise LengthMismatch(len(left), len(right), what)
        logger.warning(
            f"Truncating {what} to the shorter length: {len(left)} != {len(right)}"
        )
    return list(zip(left, right))


@dataclass(frozen=True)
class Token:
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text:
            raise ValueError(f"Token text must be a non-empty string: {self.text!r}")

    def __str__(self) -> str:
        return self.text

    @property
    def suffix(self) -> str:
        """The last three characters, or the whole text if shorter."""
        return self.text[-3:]

    def matches(self, text: str) -> bool:
        return self.text == text


def _as_token(token: Union[Token, str]) -> Token:
    return token if isinstance(token, Token) else Token(token)


@dataclass(frozen=True)
class Sentence:
    """A sentence of tokens without tags, as produced by a tokenizer."""

    tokens: tuple[Token, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tokens", tuple(self.tokens))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Sentence":
        return cls(tuple(Token(w) for w in words))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def apply_tags(
        self, tags: Sequence[T], config: Optional[AlignmentConfig] = None
    ) -> "TaggedSentence[T]":
        """Pair each token with the tag at the same position."""
        pairs = zip_aligned(self.tokens, tags, config, what="tokens and tags")
        return TaggedSentence(tuple(POS(tag, token) for token, tag in pairs))


@dataclass(frozen=True)
class POS(Generic[T]):
    tag: T
    token: Token

    def __post_init__(self):
        object.__setattr__(self, "token", _as_token(self.token))

    def show(self) -> str:
        return self.token.text

    def render(self) -> str:
        return f"{self.token.text}/{self.tag.canonical_form()}"

    def leaves(self) -> Iterator["POS[T]"]:
        yield self


@dataclass(frozen=True)
class TaggedSentence(Generic[T]):
    """A sentence with one POS tag per token, as produced by a tagger."""

    units: tuple[POS[T], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "units", tuple(self.units))

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[POS[T]]:
        return iter(self.units)

    @classmethod
    def concat(cls, sentences: Iterable["TaggedSentence[T]"]) -> "TaggedSentence[T]":
        return cls(tuple(unit for ts in sentences for unit in ts.units))

    def tokens(self) -> tuple[Token, ...]:
        return tuple(unit.token for unit in self.units)

    def tags(self) -> tuple[T, ...]:
        return tuple(unit.tag for unit in self.units)

    def unzip_tags(self) -> tuple[Sentence, tuple[T, ...]]:
        """Split into the underlying Sentence and a parallel tuple of tags."""
        return Sentence(self.tokens()), self.tags()

    def strip_tags(self) -> Sentence:
        return self.unzip_tags()[0]

    def render(self) -> str:
        """Common tagged format, eg: `the/at dog/nn jumped/vbd ./.`"""
        return " ".join(unit.render() for unit in self.units)

    def contains(self, text: str) -> bool:
        """True if some token is exactly `text` (case-sensitive, no partial matches)."""
        return any(unit.token.matches(text) for unit in self.units)

    def contains_tag(self, tag: T) -> bool:
        return any(unit.tag == tag for unit in self.units)


@dataclass(frozen=True)
class Chunk(Generic[C, T]):
    """A chunk-type label over an ordered run of chunks and tagged tokens.

    The leaves of a chunk are expected to be a contiguous run of the
    sentence's tokens; this is not checked.
    """

    chunk: C
    children: tuple["ChunkOr[C, T]", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def leaves(self) -> Iterator[POS[T]]:
        for child in self.children:
            yield from _leaves(child)


ChunkOr = Union[Chunk[C, T], POS[T]]


def _leaves(node: "ChunkOr") -> Iterator[POS]:
    if isinstance(node, POS):
        yield node
    elif isinstance(node, Chunk):
        yield from node.leaves()
    else:
        raise TypeError(f"Expected a Chunk or POS node, got {type(node).__name__}")


def mk_chunk(chunk: C, children: Iterable[ChunkOr]) -> Chunk:
    return Chunk(chunk, tuple(children))


def mk_chink(tag: T, token: Union[Token, str]) -> POS[T]:
    return POS(tag, _as_token(token))


@dataclass(frozen=True)
class ChunkedSentence(Generic[C, T]):
    """A tagged sentence grouped into (possibly nested) chunks, as produced by a chunker."""

    roots: tuple[ChunkOr, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "roots", tuple(self.roots))

    def __len__(self) -> int:
        return len(self.roots)

    def __iter__(self) -> Iterator[ChunkOr]:
        return iter(self.roots)

    def leaves(self) -> Iterator[POS[T]]:
        for root in self.roots:
            yield from _leaves(root)

    def chunks(self) -> Iterator[Chunk[C, T]]:
        stack = list(reversed(self.roots))
        while stack:
            node = stack.pop()
            if isinstance(node, Chunk):
                yield node
                stack.extend(reversed(node.children))
            elif not isinstance(node, POS):
                raise TypeError(f"Expected a Chunk or POS node, got {type(node).__name__}")

    def to_tagged(self) -> TaggedSentence[T]:
        return TaggedSentence(tuple(self.leaves()))

    def strip_tags(self) -> Sentence:
        return self.to_tagged().strip_tags()

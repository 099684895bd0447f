"""Text forms of tagged and chunked sentences.

The tagged form is the interchange format for tagged text:

    I/nn saw/vb him/nn ./.

one `token/tag` unit per token, units joined by a single space. Chunked
sentences render each chunk in brackets, led by its chunk form:

    [NP I/nn] [VP saw/vb him/nn] ./.
"""
from typing import Type

from nlptree.data import POS, Chunk, ChunkedSentence, ChunkOr, TaggedSentence, Token
from nlptree.tags import T


def render_tagged(sentence: TaggedSentence) -> str:
    return sentence.render()


def _parse_unit(unit: str, tag_type: Type[T]) -> POS[T]:
    text, sep, form = unit.rpartition("/")
    if not sep or not text:
        return POS(tag_type.unknown(), Token(unit))
    return POS(tag_type.parse(form), Token(text))


def parse_tagged(text: str, tag_type: Type[T]) -> TaggedSentence[T]:
    """Read the tagged form back into a TaggedSentence.

    Each unit is split at its last `/`, so tokens may themselves contain
    slashes. Units with no tag get the vocabulary's wildcard.
    """
    return TaggedSentence(tuple(_parse_unit(unit, tag_type) for unit in text.split()))


def render_node(node: ChunkOr) -> str:
    if isinstance(node, POS):
        return node.render()
    elif isinstance(node, Chunk):
        inner = " ".join(render_node(child) for child in node.children)
        label = node.chunk.canonical_form()
        return f"[{label} {inner}]" if inner else f"[{label}]"
    raise TypeError(f"Expected a Chunk or POS node, got {type(node).__name__}")


def render_chunked(sentence: ChunkedSentence) -> str:
    return " ".join(render_node(root) for root in sentence.roots)

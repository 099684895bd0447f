"""IOB encoding of chunked sentences and conversion to/from nltk trees.

IOB labels are `O` for tokens outside any chunk, `B-<chunk>` for the first
token of a chunk and `I-<chunk>` for the rest, eg:

    I/nn B-NP  saw/vb B-VP  him/nn I-VP  ./. O

IOB cannot express nesting, so nested chunks are flattened under their
outermost chunk.
"""
import logging
from typing import Iterable, Optional, Type

from nltk.tree import Tree

from nlptree.data import POS, Chunk, ChunkedSentence, ChunkOr, Token, mk_chunk
from nlptree.tags import C, T

logger = logging.getLogger(__name__)

OUTSIDE = "O"


def to_iob(sentence: ChunkedSentence) -> list[tuple[POS, str]]:
    """Label every leaf with its IOB label.

    Chunks with no leaves have nothing to label and are dropped (with a
    warning), so they do not survive a `from_iob` round trip.
    """
    labels: list[tuple[POS, str]] = []
    for root in sentence.roots:
        if isinstance(root, POS):
            labels.append((root, OUTSIDE))
        elif isinstance(root, Chunk):
            form = root.chunk.canonical_form()
            prefix = "B"
            for leaf in root.leaves():
                labels.append((leaf, f"{prefix}-{form}"))
                prefix = "I"
            if prefix == "B":
                logger.warning(f"Dropping empty {form} chunk from IOB labels")
        else:
            raise TypeError(f"Expected a Chunk or POS node, got {type(root).__name__}")
    return labels


def from_iob(
    units: Iterable[tuple[POS, str]], chunk_type: Type[C]
) -> ChunkedSentence:
    """Rebuild a (flat) chunked sentence from IOB-labelled units.

    An `I-` label that does not continue a chunk of the same type opens a new
    chunk; labels that are not IOB are read as `O`. Both are logged.
    """
    roots: list[ChunkOr] = []
    chunk_form: Optional[str] = None
    children: list[POS] = []

    def close():
        nonlocal chunk_form, children
        if chunk_form is not None:
            roots.append(mk_chunk(chunk_type.parse(chunk_form), children))
        chunk_form = None
        children = []

    for i, (pos, label) in enumerate(units):
        iob, _, form = label.partition("-")
        if label == OUTSIDE:
            close()
            roots.append(pos)
        elif iob == "B" and form:
            close()
            chunk_form = form
            children = [pos]
        elif iob == "I" and form:
            if form != chunk_form:
                logger.warning(
                    f"Invalid IOB transition at {i}: {chunk_form or OUTSIDE} -> {label}"
                )
                close()
                chunk_form = form
            children.append(pos)
        else:
            logger.warning(f"Invalid IOB label at {i}: {label!r}")
            close()
            roots.append(pos)
    close()
    return ChunkedSentence(tuple(roots))


def _to_nltk(node: ChunkOr):
    if isinstance(node, POS):
        return (node.token.text, node.tag.canonical_form())
    elif isinstance(node, Chunk):
        return Tree(node.chunk.canonical_form(), [_to_nltk(c) for c in node.children])
    raise TypeError(f"Expected a Chunk or POS node, got {type(node).__name__}")


def to_nltk_tree(sentence: ChunkedSentence, root: str = "S") -> Tree:
    """nltk chunk tree with `(word, tag)` leaves, as nltk's chunkers produce."""
    return Tree(root, [_to_nltk(node) for node in sentence.roots])


def _from_nltk(node, tag_type: Type[T], chunk_type: Type[C]) -> ChunkOr:
    if isinstance(node, Tree):
        return mk_chunk(
            chunk_type.parse(node.label()),
            [_from_nltk(child, tag_type, chunk_type) for child in node],
        )
    elif isinstance(node, tuple) and len(node) == 2:
        word, tag = node
        return POS(tag_type.parse(tag), Token(word))
    raise TypeError(f"Expected an nltk Tree or a (word, tag) leaf, got {node!r}")


def from_nltk_tree(
    tree: Tree, tag_type: Type[T], chunk_type: Type[C]
) -> ChunkedSentence:
    return ChunkedSentence(
        tuple(_from_nltk(child, tag_type, chunk_type) for child in tree)
    )

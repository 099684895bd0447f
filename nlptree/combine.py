"""Consensus merging of several taggers' output over the same sentence.

The first tagger has priority: its tag is kept unless it is the wildcard,
in which case the next tagger's tag fills the gap.
"""
import logging
from typing import Optional, Sequence

from nlptree.config import DEFAULT_ALIGNMENT, AlignmentConfig, MismatchPolicy
from nlptree.data import POS, TaggedSentence, zip_aligned
from nlptree.errors import TokenMismatch
from nlptree.tags import T, is_unknown

logger = logging.getLogger(__name__)


def pick_tag(a: POS[T], b: POS[T], position: Optional[int] = None) -> POS[T]:
    """Returns `a`, unless it is tagged with the wildcard.

    Raises TokenMismatch if the two units are not over the same text.
    """
    if a.token != b.token:
        raise TokenMismatch(position, a.token.text, b.token.text)
    if not is_unknown(a.tag):
        return a
    return POS(b.tag, a.token)


def combine_sentences(
    primary: TaggedSentence[T],
    fallback: TaggedSentence[T],
    config: Optional[AlignmentConfig] = None,
) -> TaggedSentence[T]:
    pairs = zip_aligned(primary.units, fallback.units, config, what="tagged sentences")
    units = tuple(pick_tag(a, b, i) for i, (a, b) in enumerate(pairs))
    if logger.isEnabledFor(logging.DEBUG):
        fell_back = sum(1 for a, _ in pairs if is_unknown(a.tag))
        logger.debug(f"{fell_back} of {len(units)} units fell back to the secondary tagging")
    return TaggedSentence(units)


def combine(
    primary: Sequence[TaggedSentence[T]],
    fallback: Sequence[TaggedSentence[T]],
    config: Optional[AlignmentConfig] = None,
) -> list[TaggedSentence[T]]:
    """Combine two taggers' output sentence by sentence, using the second to
    fill in wildcard entries of the first. A TokenMismatch in one pair is
    handled per `config.on_mismatch`.
    """
    config = config or DEFAULT_ALIGNMENT
    combined = []
    for i, (a, b) in enumerate(zip_aligned(primary, fallback, config, what="sentence batches")):
        try:
            combined.append(combine_sentences(a, b, config))
        except TokenMismatch as e:
            error = e.in_sentence(i)
            if config.on_mismatch is not MismatchPolicy.KEEP_PRIMARY:
                raise error from e
            logger.warning(f"Keeping primary tagging unmerged: {error}")
            combined.append(a)
    return combined


def combine_all(
    sentences: Sequence[TaggedSentence[T]],
    config: Optional[AlignmentConfig] = None,
) -> TaggedSentence[T]:
    """Merge any number of taggings of one sentence, highest priority first."""
    if not sentences:
        raise ValueError("combine_all needs at least one tagged sentence")
    merged = sentences[0]
    for fallback in sentences[1:]:
        merged = combine_sentences(merged, fallback, config)
    return merged

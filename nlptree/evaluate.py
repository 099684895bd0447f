"""Scoring taggers and chunkers against gold-standard sentences.

Gold and predicted sentences must be over the same tokens; a sentence pair
that disagrees on any token text raises TokenMismatch rather than being
scored.
"""
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from nltk.chunk.util import ChunkScore
from sklearn.metrics import precision_recall_fscore_support

from nlptree.data import POS, ChunkedSentence, TaggedSentence, zip_aligned
from nlptree.errors import TokenMismatch
from nlptree.iob import to_iob, to_nltk_tree


@dataclass(frozen=True)
class ChunkScores:
    precision: float
    recall: float
    f_measure: float
    iob_accuracy: float


def _aligned_units(
    gold: Sequence[TaggedSentence], predicted: Sequence[TaggedSentence]
) -> list[tuple[POS, POS]]:
    pairs = []
    for i, (g, p) in enumerate(zip_aligned(gold, predicted, what="sentence batches")):
        units = zip_aligned(g.units, p.units, what="tagged sentences")
        for j, (g_unit, p_unit) in enumerate(units):
            if g_unit.token != p_unit.token:
                raise TokenMismatch(j, g_unit.token.text, p_unit.token.text, i)
            pairs.append((g_unit, p_unit))
    return pairs


def _tag_forms(
    gold: Sequence[TaggedSentence], predicted: Sequence[TaggedSentence]
) -> tuple[np.ndarray, np.ndarray]:
    pairs = _aligned_units(gold, predicted)
    gold_forms = np.array([g.tag.canonical_form() for g, _ in pairs], dtype=object)
    pred_forms = np.array([p.tag.canonical_form() for _, p in pairs], dtype=object)
    return gold_forms, pred_forms


def tag_accuracy(
    gold: Sequence[TaggedSentence], predicted: Sequence[TaggedSentence]
) -> float:
    gold_forms, pred_forms = _tag_forms(gold, predicted)
    if len(gold_forms) == 0:
        return 0.0
    return float(np.mean(gold_forms == pred_forms))


def tag_report(
    gold: Sequence[TaggedSentence], predicted: Sequence[TaggedSentence]
) -> dict[str, dict[str, float]]:
    """Per-tag precision, recall, f1 and support, keyed by tag form."""
    gold_forms, pred_forms = _tag_forms(gold, predicted)
    if len(gold_forms) == 0:
        return {}
    labels = sorted(set(gold_forms) | set(pred_forms))
    precision, recall, f1, support = precision_recall_fscore_support(
        list(gold_forms), list(pred_forms), labels=labels, average=None, zero_division=0
    )
    return {
        label: {
            "precision": float(precision[i]),
            "recall": float(recall[i]),
            "f1": float(f1[i]),
            "support": int(support[i]),
        }
        for i, label in enumerate(labels)
    }


def _iob_accuracy(
    gold: Sequence[ChunkedSentence], predicted: Sequence[ChunkedSentence]
) -> float:
    gold_labels = np.array(
        [label for g in gold for _, label in to_iob(g)], dtype=object
    )
    pred_labels = np.array(
        [label for p in predicted for _, label in to_iob(p)], dtype=object
    )
    if len(gold_labels) == 0:
        return 0.0
    return float(np.mean(gold_labels == pred_labels))


def chunk_scores(
    gold: Sequence[ChunkedSentence], predicted: Sequence[ChunkedSentence]
) -> ChunkScores:
    """Chunk-level precision/recall/f-measure and IOB label accuracy.

    A predicted chunk counts as correct only if it has the gold chunk's
    type, span and leaf tags. Chunk precision and recall compare top-level
    chunks only; IOB accuracy compares `to_iob` labels, so nested chunks are
    scored under their outermost chunk, and is 0.0 when there are no tokens.
    """
    _aligned_units(
        [g.to_tagged() for g in gold], [p.to_tagged() for p in predicted]
    )
    score = ChunkScore()
    for g, p in zip(gold, predicted):
        score.score(to_nltk_tree(g), to_nltk_tree(p))
    return ChunkScores(
        precision=float(score.precision()),
        recall=float(score.recall()),
        f_measure=float(score.f_measure()),
        iob_accuracy=_iob_accuracy(gold, predicted),
    )

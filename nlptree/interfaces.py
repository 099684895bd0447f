from abc import ABCMeta, abstractmethod
from typing import Iterable, Optional, Sequence

from nlptree.combine import combine_all
from nlptree.config import AlignmentConfig
from nlptree.data import ChunkedSentence, Sentence, TaggedSentence


class Tokenizer(metaclass=ABCMeta):
    @abstractmethod
    def tokenize(self, text: str) -> Sentence:
        pass


class Tagger(metaclass=ABCMeta):
    @abstractmethod
    def tag(self, sentence: Sentence) -> TaggedSentence:
        pass

    def tag_sentences(self, sentences: Iterable[Sentence]) -> list[TaggedSentence]:
        return [self.tag(s) for s in sentences]


class Chunker(metaclass=ABCMeta):
    @abstractmethod
    def chunk(self, sentence: TaggedSentence) -> ChunkedSentence:
        pass


class ConsensusTagger(Tagger):
    """Tags with every wrapped tagger and merges the results.

    Taggers are given in priority order: a tagger's tag is only used where
    every tagger before it produced the wildcard.
    """

    def __init__(
        self, taggers: Sequence[Tagger], config: Optional[AlignmentConfig] = None
    ):
        if not taggers:
            raise ValueError("ConsensusTagger needs at least one tagger")
        self.taggers: list[Tagger] = list(taggers)
        self.config: Optional[AlignmentConfig] = config

    def tag(self, sentence: Sentence) -> TaggedSentence:
        return combine_all([t.tag(sentence) for t in self.taggers], self.config)

from nlptree.combine import combine, combine_all, combine_sentences, pick_tag
from nlptree.config import DEFAULT_ALIGNMENT, AlignmentConfig, LengthPolicy, MismatchPolicy
from nlptree.data import (
    POS,
    Chunk,
    ChunkedSentence,
    ChunkOr,
    Sentence,
    TaggedSentence,
    Token,
    mk_chink,
    mk_chunk,
)
from nlptree.errors import ContractViolation, LengthMismatch, TokenMismatch
from nlptree.interfaces import Chunker, ConsensusTagger, Tagger, Tokenizer
from nlptree.render import parse_tagged, render_chunked, render_tagged
from nlptree.tags import ChunkTag, RawChunk, RawTag, Tag, is_unknown

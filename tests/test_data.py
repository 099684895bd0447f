import dataclasses

import pytest
from hypothesis import given, strategies as st

from nlptree import brown
from nlptree.brown import Tag as B
from nlptree.config import AlignmentConfig, LengthPolicy, MismatchPolicy
from nlptree.data import POS, Sentence, TaggedSentence, Token
from nlptree.errors import LengthMismatch
from strategies import sentences, tagged_sentences, tags


@pytest.fixture
def saw_him():
    return Sentence.from_words(["I", "saw", "him", "."]).apply_tags(
        [B.NN, B.VB, B.NN, B.Term]
    )


def test_token_rejects_empty_text():
    with pytest.raises(ValueError):
        Token("")


def test_token_equality_is_case_sensitive():
    assert Token("Dog") != Token("dog")
    assert Token("dog") == Token("dog")


@pytest.mark.parametrize(
    "text, suffix",
    [("a", "a"), ("the", "the"), ("jumped", "ped"), ("dogs", "ogs")],
)
def test_suffix(text, suffix):
    assert Token(text).suffix == suffix


def test_values_are_immutable(saw_him):
    with pytest.raises(dataclasses.FrozenInstanceError):
        saw_him.units = ()
    assert isinstance(saw_him.units, tuple)


def test_render(saw_him):
    assert saw_him.render() == "I/nn saw/vb him/nn ./."


def test_render_brown_example():
    ts = Sentence.from_words(["the", "dog", "jumped", "."]).apply_tags(
        [B.AT, B.NN, B.VBD, B.Term]
    )
    assert ts.render() == "the/at dog/nn jumped/vbd ./."


def test_render_empty():
    assert TaggedSentence().render() == ""


def test_contains(saw_him):
    assert saw_him.contains("saw")
    assert not saw_him.contains("ran")
    assert not saw_him.contains("Saw")
    assert not saw_him.contains("sa")


def test_contains_tag(saw_him):
    assert saw_him.contains_tag(B.VB)
    assert not saw_him.contains_tag(B.VBD)


def test_length(saw_him):
    assert len(saw_him) == 4


def test_pos_show_and_render():
    unit = POS(B.NN, Token("dog"))
    assert unit.show() == "dog"
    assert unit.render() == "dog/nn"


def test_apply_tags_length_mismatch_is_strict_by_default():
    sentence = Sentence.from_words(["a", "b", "c"])
    with pytest.raises(LengthMismatch) as excinfo:
        sentence.apply_tags([B.AT, B.NN])
    assert excinfo.value.left_length == 3
    assert excinfo.value.right_length == 2


def test_apply_tags_truncates_when_configured(caplog):
    sentence = Sentence.from_words(["a", "b", "c"])
    config = AlignmentConfig(length_policy=LengthPolicy.TRUNCATE)
    ts = sentence.apply_tags([B.AT, B.NN], config)
    assert ts.render() == "a/at b/nn"
    assert "Truncating" in caplog.text


def test_alignment_config_from_name():
    assert AlignmentConfig.from_name("Truncate").length_policy is LengthPolicy.TRUNCATE
    with pytest.raises(ValueError):
        AlignmentConfig.from_name("loose")
    config = AlignmentConfig.from_name("strict", on_mismatch="keep_primary")
    assert config.on_mismatch is MismatchPolicy.KEEP_PRIMARY
    with pytest.raises(ValueError):
        AlignmentConfig.from_name("strict", on_mismatch="ignore")


@given(st.data(), sentences())
def test_strip_tags_inverts_apply_tags(data, sentence):
    tag_list = data.draw(st.lists(tags, min_size=len(sentence), max_size=len(sentence)))
    assert sentence.apply_tags(tag_list).strip_tags() == sentence


@given(tagged_sentences())
def test_unzip_tags_inverts_apply_tags(ts):
    sentence, tag_list = ts.unzip_tags()
    assert len(sentence) == len(tag_list) == len(ts)
    assert sentence.apply_tags(tag_list) == ts


@given(st.lists(tagged_sentences(max_size=5), max_size=6), st.integers(min_value=0, max_value=6))
def test_concat_is_associative(xs, k):
    k = min(k, len(xs))
    head = TaggedSentence.concat(xs[:k])
    assert TaggedSentence.concat([head] + xs[k:]) == TaggedSentence.concat(xs)


@given(st.lists(tagged_sentences(max_size=5), max_size=6))
def test_concat_preserves_order_and_length(xs):
    joined = TaggedSentence.concat(xs)
    assert len(joined) == sum(len(x) for x in xs)
    assert list(joined) == [unit for x in xs for unit in x]


def test_tagged_sentence_is_generic_over_vocabulary():
    assert brown.Tag.Unk.canonical_form() == "unk"
    ts = TaggedSentence([POS(B.NN, "dog")])
    assert ts.tokens() == (Token("dog"),)
    assert ts.tags() == (B.NN,)

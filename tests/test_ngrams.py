import pytest

from textkit import InvalidArgument, as_tokenized_texts, tokenize, tokens_ngrams, tokens_skipgrams
from textkit.ngrams import expand


def test_bigrams():
    assert tokenize("a b c", ngram_sizes={2}, simplify=True) == ["a_b", "b_c"]


def test_unigrams_and_bigrams():
    assert tokenize("a b c", ngram_sizes={1, 2}, simplify=True) == ["a", "b", "c", "a_b", "b_c"]


def test_sizes_in_given_order():
    assert expand(["a", "b", "c"], [2, 1]) == ["a_b", "b_c", "a", "b", "c"]


def test_set_sizes_are_sorted():
    assert expand(["a", "b", "c"], {2, 1}) == ["a", "b", "c", "a_b", "b_c"]


def test_skipgrams():
    assert expand(["a", "b", "c", "d"], 2, skips=1) == ["a_c", "b_d"]
    assert expand(["a", "b", "c", "d"], 2, skips=[0, 1]) == ["a_b", "b_c", "c_d", "a_c", "b_d"]


def test_unigrams_once_whatever_the_skips():
    assert expand(["a", "b"], 1, skips=[0, 1, 2]) == ["a", "b"]


def test_trigrams_and_concatenator():
    assert expand(["a", "b", "c", "d"], 3, concatenator=" ") == ["a b c", "b c d"]


def test_n_longer_than_document():
    assert expand(["a"], 2) == []
    assert expand([], [1, 2]) == []


@pytest.mark.parametrize("sizes", [0, [1, 0], [], "2", True])
def test_bad_sizes(sizes):
    with pytest.raises(InvalidArgument):
        expand(["a"], sizes)


def test_bad_skips():
    with pytest.raises(InvalidArgument):
        expand(["a"], 2, skips=-1)


def test_ngrams_after_filtering():
    toks = tokenize("a, b. c!", remove_punct=True, ngram_sizes=2, simplify=True)
    assert toks == ["a_b", "b_c"]


def test_tokens_ngrams_returns_new_batch():
    batch = as_tokenized_texts([["a", "b", "c"], ["d"]])
    out = tokens_ngrams(batch, n=2, concatenator="-")
    assert out["text1"] == ("a-b", "b-c")
    assert out["text2"] == ()
    assert out.ngrams == (2,)
    assert out.concatenator == "-"
    assert batch["text1"] == ("a", "b", "c")


def test_tokens_ngrams_keeps_failures():
    batch = tokenize(["a b", b"\xff"])
    out = tokens_ngrams(batch, 2)
    assert out["text1"] == ("a_b",)
    assert out.failure("text2") is not None


def test_tokens_skipgrams():
    batch = as_tokenized_texts([["a", "b", "c", "d"]])
    assert tokens_skipgrams(batch, 2, [1, 2])["text1"] == ("a_c", "b_d", "a_d")

import pytest

from textkit import Granularity, UnsupportedGranularity, tokenize


def _toks(text, granularity, **kwargs):
    return list(tokenize(text, granularity=granularity, **kwargs)["text1"])


class TestSentence:
    def test_abbreviation_does_not_end_sentence(self):
        assert _toks("Mr. Smith went home.", "sentence") == ["Mr. Smith went home."]

    def test_several_abbreviations(self):
        assert _toks("Prof. Plum killed Mrs. Peacock.", "sentence") == ["Prof. Plum killed Mrs. Peacock."]

    def test_two_sentences(self):
        assert _toks("Hello world. Goodbye world.", "sentence") == ["Hello world.", "Goodbye world."]

    def test_newlines_do_not_break_sentences(self):
        assert _toks("To be?  Or\nnot to be?", "sentence") == ["To be?", "Or not to be?"]

    def test_class_filters_do_not_apply(self):
        text = "It costs $10, really."
        assert _toks(text, "sentence", remove_punct=True, remove_numbers=True) == [text]

    def test_empty(self):
        assert _toks("", "sentence") == []


class TestCharacter:
    def test_default_drops_spaces(self):
        assert _toks("a b!", "character") == ["a", "b", "!"]

    def test_keep_spaces(self):
        assert _toks("a b!", "character", remove_separators=False) == ["a", " ", "b", "!"]

    def test_remove_punct(self):
        assert _toks("a b!", "character", remove_punct=True) == ["a", "b"]

    def test_remove_symbols_and_numbers(self):
        assert _toks("a+1", "character", remove_symbols=True, remove_numbers=True) == ["a"]

    def test_grapheme_clusters(self):
        assert _toks("e\u0301a", "character") == ["e\u0301", "a"]


class TestWhitespace:
    def test_splits_on_any_whitespace(self):
        assert _toks("a  b\tc\nd", "whitespace") == ["a", "b", "c", "d"]

    def test_punct_attached_to_words_is_kept(self):
        assert _toks("Hello, world!", "whitespace") == ["Hello,", "world!"]

    def test_remove_punct_keeps_twitter_tags(self):
        assert _toks("Hello, world! #tag @me", "whitespace", remove_punct=True) == ["Hello", "world", "#tag", "@me"]

    def test_remove_punct_without_twitter_tags(self):
        toks = _toks("Hello, world! #tag @me", "whitespace", remove_punct=True, preserve_twitter_tags=False)
        assert toks == ["Hello", "world", "tag", "me"]

    @pytest.mark.parametrize("remove_hyphens, expected", [
        (False, ["self-storage", "units"]),
        (True, ["self", "storage", "units"]),
    ])
    def test_hyphens(self, remove_hyphens, expected):
        assert _toks("self-storage units", "whitespace", remove_punct=True, remove_hyphens=remove_hyphens) == expected

    def test_alias(self):
        batch = tokenize("a b", granularity="fasterword")
        assert batch.granularity == "whitespace"
        assert list(batch["text1"]) == ["a", "b"]


class TestFixedDelimiter:
    def test_only_space_splits(self):
        assert _toks("a  b\tc", "fixed-delimiter") == ["a", "b\tc"]

    def test_remove_numbers(self):
        assert _toks("42 is 2day", "fixed-delimiter", remove_numbers=True) == ["is", "2day"]

    def test_remove_punct_keeps_hyphens(self):
        assert _toks("well-known, sure.", "fixed-delimiter", remove_punct=True) == ["well-known", "sure"]

    def test_aliases(self):
        assert tokenize("a", granularity="fastestword").granularity == "fixed-delimiter"
        assert tokenize("a", granularity="fixed_delimiter").granularity == "fixed-delimiter"


@pytest.mark.parametrize("granularity", ["paragraph", "", "words"])
def test_unsupported_granularity(granularity):
    with pytest.raises(UnsupportedGranularity):
        tokenize("x", granularity=granularity)


def test_unsupported_granularity_raises_before_processing():
    # an undecodable document would otherwise be recorded as a failure
    with pytest.raises(UnsupportedGranularity):
        tokenize([b"\xff"], granularity="paragraph")


def test_granularity_parse_is_case_insensitive():
    assert Granularity.parse(" Word ") is Granularity.WORD
    assert Granularity.parse(Granularity.SENTENCE) is Granularity.SENTENCE

import pytest

from textkit import tokenize

PLACEHOLDER_MARKERS = ("‿", "⁀", "ht‿", "‿as", "‿pd", "‿hy")


def assert_no_placeholders(tokens):
    for tok in tokens:
        for marker in PLACEHOLDER_MARKERS:
            assert marker not in tok, f"placeholder leaked into {tok!r}"


def _toks(text, **kwargs):
    return list(tokenize(text, **kwargs)["text1"])


def test_default_keeps_punctuation_and_drops_spaces():
    assert _toks("This is a test.") == ["This", "is", "a", "test", "."]


def test_keep_separators():
    assert _toks("a b", remove_separators=False) == ["a", " ", "b"]


def test_whitespace_runs_are_dropped_whole():
    assert _toks("a   \t b\u3000c") == ["a", "b", "c"]


def test_remove_punct_drops_spaces_too():
    assert _toks("Hello, world!", remove_punct=True, remove_separators=False) == ["Hello", "world"]


@pytest.mark.parametrize("remove_hyphens, expected", [
    (False, ["self-storage"]),
    (True, ["self", "storage"]),
])
def test_hyphens(remove_hyphens, expected):
    assert _toks("self-storage", remove_punct=True, remove_hyphens=remove_hyphens) == expected


def test_hyphen_without_punct_removal_is_a_token():
    assert _toks("self-storage") == ["self", "-", "storage"]


def test_remove_hyphens_splits_even_without_punct_removal():
    assert _toks("auto-loading data", remove_hyphens=True) == ["auto", "loading", "data"]


def test_other_dashes_are_restored_verbatim():
    assert _toks("pre–war era", remove_punct=True) == ["pre–war", "era"]


def test_numbers():
    assert _toks("2day is great", remove_numbers=True) == ["2day", "is", "great"]
    assert _toks("42 is great", remove_numbers=True) == ["is", "great"]


def test_numbers_kept_by_default():
    assert "42" in _toks("42 is great")


def test_twitter_tags_preserved_with_punct_removal():
    toks = _toks("#textanalysis is MY <3 4U @myhandle gr8 #stuff :-)", remove_punct=True)
    assert toks == ["#textanalysis", "is", "MY", "<", "3", "4U", "@myhandle", "gr8", "#stuff"]
    assert_no_placeholders(toks)


def test_twitter_tags_removed_when_not_preserved():
    toks = _toks("#textanalysis and @myhandle", remove_punct=True, preserve_twitter_tags=False)
    assert toks == ["textanalysis", "and", "myhandle"]


def test_twitter_tags_kept_whole_without_punct_removal():
    assert _toks("go #team") == ["go", "#team"]


def test_remove_symbols():
    assert _toks("<tags> and other + symbols.", remove_symbols=True) == ["tags", "and", "other", "symbols", "."]


def test_symbols_kept_by_default():
    assert _toks("<tags> and other + symbols.") == ["<", "tags", ">", "and", "other", "+", "symbols", "."]


def test_remove_url():
    toks = _toks("Visit https://example.com today", remove_url=True)
    assert toks == ["Visit", "today"]
    assert not any(t.startswith("http") for t in toks)


def test_url_with_hyphenated_host_is_removed_whole():
    toks = _toks("see https://my-site.org/a-b?x=1 now", remove_url=True, remove_punct=True)
    assert toks == ["see", "now"]


def test_full_example(tweets):
    batch = tokenize(tweets, remove_numbers=True, remove_punct=True, remove_url=True)
    assert list(batch["text1"]) == [
        "This", "is", "$", "in", "different", "ways", "up", "and", "down", "left", "and", "right",
    ]
    assert list(batch["text2"]) == ["@kenbenoit", "working", "on", "#quanteda", "2day", "4ever"]


def test_connector_already_in_text_is_left_alone():
    toks = _toks("a‿b #tag", remove_punct=True)
    assert toks == ["a‿b", "#tag"]


def test_empty_and_blank_documents():
    batch = tokenize(["", "   ", "!!!"], remove_punct=True)
    assert len(batch) == 3
    assert all(batch[name] == () for name in batch)


@pytest.mark.parametrize("text", [
    "#a @b c-d e.",
    "Mr. Smith, Ph.D. lives on St. Mark's",
    "x-y-z #one-two @three_four",
    "—dash— well-known",
    "@ht# #hy002d@ #as@ a-@b#c",
])
@pytest.mark.parametrize("remove_punct", [False, True])
def test_placeholders_never_leak(text, remove_punct):
    for granularity in ("word", "whitespace", "fixed-delimiter", "sentence", "character"):
        batch = tokenize(text, granularity=granularity, remove_punct=remove_punct)
        assert_no_placeholders(batch["text1"])


@pytest.mark.parametrize("text", ["@ht#", "#hy002d@", "#as@", "@pd#", "a-@b#c", "#-x"])
@pytest.mark.parametrize("remove_punct", [False, True])
def test_adjacent_placeholders_restore_exactly(text, remove_punct):
    toks = _toks(text, remove_punct=remove_punct)
    assert "".join(toks) == text
    assert_no_placeholders(toks)

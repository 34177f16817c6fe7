from textkit import as_tokenized_texts, char_tolower, char_toupper, tokenize, tokens_tolower, tokens_toupper


def test_char_tolower():
    assert char_tolower("According to NATO") == "according to nato"


def test_char_tolower_keep_acronyms():
    assert char_tolower("According to NATO, the USA is...", keep_acronyms=True) == "according to NATO, the USA is..."


def test_char_toupper():
    assert char_toupper("Straße") == "STRASSE"


def test_tokens_tolower():
    batch = as_tokenized_texts({"d": ["According", "to", "NATO"]})
    assert tokens_tolower(batch)["d"] == ("according", "to", "nato")
    assert tokens_tolower(batch, keep_acronyms=True)["d"] == ("according", "to", "NATO")
    assert batch["d"] == ("According", "to", "NATO")


def test_tokens_toupper_keeps_failures():
    batch = tokenize(["a b", b"\xff"])
    out = tokens_toupper(batch)
    assert out["text1"] == ("A", "B")
    assert out.failure("text2") is not None

"""Example: tokenizing a small corpus at several granularities.

Shows the options most analyses start from, failure isolation for a
document that is not valid UTF-8, and n-grams built on the filtered tokens.
"""

from textkit import tokenize, tokens_ngrams, tokens_tolower
from textkit.tools.summary_report import render_summary

corpus = {
    "tweet": "@kenbenoit working: on #quanteda 2day\t4ever, http://textasdata.com?page=123.",
    "prose": "Mr. Smith went home. He owns a self-storage unit.",
    "broken": b"caf\xe9 au lait",  # latin-1, not UTF-8
}

# Words, keeping hashtags and handles whole
words = tokenize(corpus, remove_punct=True, remove_url=True)
print(words)

# Sentences: abbreviations do not end a sentence
print(tokenize(corpus["prose"], granularity="sentence", simplify=True))

# Split hyphenated words instead of keeping them
print(tokenize(corpus["prose"], remove_punct=True, remove_hyphens=True, simplify=True))

# The undecodable document is reported, the others are still tokenized
for f in words.failures:
    print(f"failed: {f.name}: {f.reason}")

bigrams = tokens_ngrams(tokens_tolower(words), n=[1, 2])
render_summary(bigrams)

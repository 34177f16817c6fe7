"""N-gram and skip-gram expansion.

`expand` works on one token sequence; `tokens_ngrams` maps it over a
TokenizedBatch and returns a new batch.

Order of the output: for each n in `sizes` (as given), for each skip in
`skips`, every window left to right. Unigrams are emitted once whatever the
skips.

    >>> expand(["a", "b", "c"], [1, 2])
    ['a', 'b', 'c', 'a_b', 'b_c']
    >>> expand(["a", "b", "c", "d"], [2], skips=[1])
    ['a_c', 'b_d']
"""

from __future__ import annotations
from typing import Iterable, List, Sequence, Union

from .config import int_tuple
from .pipeline.context import TokenizedBatch

IntOrInts = Union[int, Iterable[int]]


def expand(tokens: Sequence[str], sizes: IntOrInts = (1,), skips: IntOrInts = (0,), concatenator: str = "_") -> List[str]:
    sizes = int_tuple(sizes, "ngram_sizes", 1)
    skips = int_tuple(skips, "skips", 0)
    toks = list(tokens)
    out: List[str] = []
    for n in sizes:
        if n == 1:
            out.extend(toks)
            continue
        for k in skips:
            step = k + 1
            reach = (n - 1) * step
            for i in range(len(toks) - reach):
                out.append(concatenator.join(toks[i + j * step] for j in range(n)))
    return out


def tokens_ngrams(batch: TokenizedBatch, n: IntOrInts = 2, skip: IntOrInts = 0, concatenator: str = "_") -> TokenizedBatch:
    sizes = int_tuple(n, "ngram_sizes", 1)
    skips = int_tuple(skip, "skips", 0)
    docs = [
        None if toks is None else tuple(expand(toks, sizes, skips, concatenator))
        for toks in batch.documents
    ]
    return batch.with_documents(
        docs,
        ngrams=sizes,
        concatenator="" if sizes == (1,) else concatenator,
    )


def tokens_skipgrams(batch: TokenizedBatch, n: IntOrInts, skip: IntOrInts, concatenator: str = "_") -> TokenizedBatch:
    return tokens_ngrams(batch, n=n, skip=skip, concatenator=concatenator)

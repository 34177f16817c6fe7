"""Tokenize orchestration.

`tokenize()` is the public entry point; `tokenize_batch()` is the same thing
for callers that already hold a DocumentBatch and TokenizeOptions (the CLI).

Flow per document (independent of every other document):
    decode -> stages from make_stages() -> tuple of tokens
then, for the whole batch, n-gram expansion as a separate pass.

With workers > 1 documents run on a thread pool; results are put back by input
index, not by completion order. A document that fails to decode (or cannot be
protected) is recorded as a DocumentFailure and never aborts its siblings.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import logging
import time
from tqdm import tqdm

from ..config import TokenizeOptions, report_unknown
from ..errors import EncodingError, InvalidArgument, ProtectionError
from ..granularity import Granularity
from ..ngrams import tokens_ngrams
from ..stages.base import Stage
from ..stages.registry import make_stages
from .context import Document, DocumentBatch, DocumentFailure, TokenizedBatch, WorkItem

log = logging.getLogger("textkit.tokenize")

Result = Tuple[Optional[Tuple[str, ...]], Optional[DocumentFailure]]


def decode_text(doc: Document) -> str:
    text = doc.text
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(doc.name, f"invalid UTF-8 at byte {e.start}: {e.reason}") from e
    elif not isinstance(text, str):
        raise EncodingError(doc.name, f"expected str or bytes, got {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(doc.name, f"unpaired surrogate at position {e.start}") from e
    return text


def run_document(doc: Document, stages: Sequence[Stage]) -> WorkItem:
    item = WorkItem(name=doc.name, text=decode_text(doc))
    for st in stages:
        st.apply(item)
    return item


def _tokenize_one(doc: Document, stages: Sequence[Stage]) -> Result:
    try:
        item = run_document(doc, stages)
    except (EncodingError, ProtectionError) as e:
        return None, DocumentFailure(doc.name, str(e), e)
    log.debug(f"{doc.name}: {len(item.spans)} tokens via {','.join(item.transform_chain)}")
    return tuple(item.tokens), None


def _map_documents(docs: Sequence[Document], stages: Sequence[Stage], workers: int, progress: bool) -> List[Result]:
    bar = tqdm(total=len(docs), desc="Tokenizing", unit="doc", disable=not progress)
    try:
        if workers <= 1 or len(docs) < 2:
            results = []
            for doc in docs:
                results.append(_tokenize_one(doc, stages))
                bar.update(1)
            return results

        results = [None] * len(docs)
        with ThreadPoolExecutor(max_workers=min(workers, len(docs))) as ex:
            futures = {ex.submit(_tokenize_one, doc, stages): i for i, doc in enumerate(docs)}
            for f in as_completed(futures):
                results[futures[f]] = f.result()
                bar.update(1)
        return results
    finally:
        bar.close()


def tokenize_batch(
    batch: DocumentBatch,
    options: TokenizeOptions,
    *,
    workers: int = 1,
    verbose: bool = False,
    progress: bool = False,
) -> TokenizedBatch:
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise InvalidArgument(f"workers must be a positive integer, got {workers!r}")
    level = logging.INFO if verbose else logging.DEBUG

    stages = make_stages(options)
    log.log(level, f"Starting tokenization of {len(batch)} texts granularity={options.granularity.value} "
                   f"stages={','.join(st.name for st in stages)} workers={workers}")
    t0 = time.perf_counter()
    results = _map_documents(batch.documents, stages, workers, progress)
    log.log(level, f"  ...tokenized in {time.perf_counter() - t0:.3f} seconds")

    failures = tuple(f for _, f in results if f is not None)
    for f in failures:
        log.warning(f"Failed to tokenize {f.name}: {f.reason}")

    out = TokenizedBatch(
        names=batch.names,
        documents=tuple(toks for toks, _ in results),
        granularity=options.granularity.value,
        failures=failures,
    )

    if not options.unigrams_only:
        t1 = time.perf_counter()
        out = tokens_ngrams(out, options.ngram_sizes, options.skips, options.concatenator)
        log.log(level, f"  ...created ngrams {list(options.ngram_sizes)} in {time.perf_counter() - t1:.3f} seconds")

    log.log(level, f"Finished tokenizing {len(out):,} texts ({len(failures)} failed)")
    return out


def tokenize(
    x,
    granularity: Union[str, Granularity] = Granularity.WORD,
    *,
    remove_numbers: bool = False,
    remove_punct: bool = False,
    remove_symbols: bool = False,
    remove_separators: bool = True,
    preserve_twitter_tags: bool = True,
    remove_hyphens: bool = False,
    remove_url: bool = False,
    ngram_sizes: Union[int, Iterable[int]] = (1,),
    skips: Union[int, Iterable[int]] = (0,),
    concatenator: str = "_",
    simplify: bool = False,
    workers: int = 1,
    strict: bool = False,
    verbose: bool = False,
    **kwargs,
) -> Union[TokenizedBatch, List[str]]:
    """Tokenize one text or a batch of texts.

    Args:
        x: a str/bytes, a Document, a sequence of those, a name -> text mapping
            or a DocumentBatch
        granularity: word | sentence | character | whitespace | fixed-delimiter
        remove_numbers: drop tokens made only of digits (`2day` is kept)
        remove_punct: drop Unicode punctuation (P); intra-word hyphens survive
            unless remove_hyphens is set
        remove_symbols: drop Unicode symbols (S)
        remove_separators: drop whitespace tokens (word) / space characters
            (character)
        preserve_twitter_tags: keep `#tag` and `@handle` whole on word-like
            granularities
        remove_hyphens: split hyphenated words (`self-storage` -> self, storage)
        remove_url: strip http(s) URLs before segmenting
        ngram_sizes: n for n-grams, e.g. 2 or [1, 2]
        skips: skip distances for skip-grams
        concatenator: joins the parts of an n-gram
        simplify: return one flat list of tokens with no document structure
        workers: number of threads used to process documents
        strict: raise InvalidArgument for unknown keyword arguments instead of
            warning
        verbose: log stage timings at INFO instead of DEBUG

    Returns:
        TokenizedBatch keyed by document name, or a list of str if simplify.

    Raises:
        UnsupportedGranularity: before any document is processed
        InvalidArgument: bad option values (or unknown ones with strict=True)
        EncodingError / ProtectionError: only with simplify=True; otherwise
            failures are recorded on the returned batch
    """
    options = TokenizeOptions(
        granularity=granularity,
        remove_numbers=remove_numbers,
        remove_punct=remove_punct,
        remove_symbols=remove_symbols,
        remove_separators=remove_separators,
        preserve_twitter_tags=preserve_twitter_tags,
        remove_hyphens=remove_hyphens,
        remove_url=remove_url,
        ngram_sizes=ngram_sizes,
        skips=skips,
        concatenator=concatenator,
    )
    report_unknown(kwargs, strict)

    batch = DocumentBatch.from_input(x)
    result = tokenize_batch(batch, options, workers=workers, verbose=verbose)
    if simplify:
        return result.flatten()
    return result

"""Read-only query functions over an EmbeddingStore.

These are the functions downstream consumers (training and inference code)
should use instead of reaching into store internals. None of them mutate the
store, so they are safe to call from several threads at once.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .store import EmbeddingStore


def get_embedding(store: EmbeddingStore, word: str) -> np.ndarray:
    """Get a read-only view of the embedding for ``word``.

    Raises:
        WordNotFoundError: If the word is not in the vocabulary
    """
    return store.get_embedding(word)


def get_embedding_norm(store: EmbeddingStore, word: str) -> float:
    """Get the precomputed norm of the embedding for ``word``.

    Raises:
        WordNotFoundError: If the word is not in the vocabulary
    """
    return store.get_embedding_norm(word)


def vocabulary_size(store: EmbeddingStore) -> int:
    return store.vocabulary_size


def dimension(store: EmbeddingStore) -> int:
    return store.dimension


def similarity(store: EmbeddingStore, word_a: str, word_b: str) -> float:
    """Cosine similarity between two words.

    Raises:
        WordNotFoundError: If either word is not in the vocabulary
    """
    a, b = store.index_of(word_a), store.index_of(word_b)
    dot = float(np.dot(store.matrix[a].astype(np.float64), store.matrix[b]))
    return dot / (float(store.norms[a]) * float(store.norms[b]))


def _rank(
    store: EmbeddingStore,
    query: np.ndarray,
    exclude: Iterable[str],
    topn: int,
) -> List[Tuple[str, float]]:
    query = np.asarray(query, dtype=np.float64)
    query_norm = np.linalg.norm(query)
    if query_norm == 0 or topn <= 0:
        return []

    # Cosine similarity against every row using the cached norms
    similarities = (store.matrix @ query) / (store.norms * query_norm)

    excluded = set(exclude)
    results: List[Tuple[str, float]] = []
    for i in np.argsort(-similarities, kind="stable"):
        word = store.vocabulary[i]
        # duplicate rows are reachable only through the index
        if word in excluded or store.word_to_index[word] != i:
            continue
        results.append((word, float(similarities[i])))
        if len(results) == topn:
            break

    return results


def most_similar(
    store: EmbeddingStore,
    query: Union[str, Sequence[float], np.ndarray],
    topn: int = 10,
    exclude: Optional[Iterable[str]] = None,
) -> List[Tuple[str, float]]:
    """Find the words whose embeddings are closest to a word or vector.

    Args:
        store: Store to search
        query: A vocabulary word or a vector of length store.dimension
        topn: Maximum number of results
        exclude: Words to leave out of the results; a word query is always
            excluded

    Returns:
        List of (word, cosine similarity), most similar first

    Raises:
        WordNotFoundError: If ``query`` is a word not in the vocabulary
        ValueError: If ``query`` is a vector of the wrong length
    """
    excluded = set(exclude or ())
    if isinstance(query, str):
        vector = store.get_embedding(query)
        excluded.add(query)
    else:
        vector = np.asarray(query, dtype=np.float64)
        if vector.shape != (store.dimension,):
            raise ValueError(
                f"Query vector must have shape ({store.dimension},), got {vector.shape}"
            )

    return _rank(store, vector, excluded, topn)


def analogy(
    store: EmbeddingStore,
    a: str,
    b: str,
    c: str,
    topn: int = 1,
) -> List[Tuple[str, float]]:
    """Solve ``a`` is to ``b`` as ``c`` is to ``?``.

    Ranks words by cosine similarity to ``b - a + c`` computed on unit
    vectors, excluding the three query words.

    Raises:
        WordNotFoundError: If any query word is not in the vocabulary
    """
    unit = {w: store.get_embedding(w) / store.get_embedding_norm(w) for w in (a, b, c)}
    target = unit[b] - unit[a] + unit[c]
    return _rank(store, target, (a, b, c), topn)

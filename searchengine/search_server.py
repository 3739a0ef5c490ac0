"""Ranking documents against free-text search requests."""

from __future__ import annotations

import string
from typing import Iterable, NamedTuple


class RelativeIndex(NamedTuple):
    """A document id with its rank relative to the best match of a request."""

    doc_id: int
    rank: float


def _query_words(request: str) -> list[str]:
    words = (word.rstrip(string.punctuation) for word in request.split())
    return sorted({word for word in words if word})


class SearchServer:
    """Answers requests using an inverted index."""

    def __init__(self, index):
        self.index = index

    def search(self, requests: Iterable[str]) -> list[list[RelativeIndex]]:
        """Refresh the index and return ranked documents for each request."""
        self.index.update_document_base()
        return [self._answer(request) for request in requests]

    def _answer(self, request: str) -> list[RelativeIndex]:
        words = _query_words(request)
        totals: dict[int, int] = {}
        for word in words:
            for doc_id, count in self.index.get_word_count(word).items():
                totals[doc_id] = totals.get(doc_id, 0) + count
        if not totals:
            return []

        max_rank = max(totals.values())
        ranked = [
            RelativeIndex(doc_id, total / max_rank if max_rank > 0 else 0.0)
            for doc_id, total in totals.items()
        ]
        ranked.sort(key=lambda item: (-item.rank, item.doc_id))
        return ranked
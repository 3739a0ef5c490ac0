"""Word frequency index over the configured documents."""

from __future__ import annotations

import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

from searchengine.converter import ConverterJSON


class InvertedIndex:
    """Maps each word to the number of its occurrences in each document."""

    def __init__(self, converter=None):
        self.converter = converter if converter is not None else ConverterJSON()
        self._freq: dict[str, dict[int, int]] = {}
        self._lock = threading.Lock()

    def update_document_base(self) -> None:
        """Rebuild the index from the documents named in the configuration."""
        with self._lock:
            self._freq = {}

        paths = self.converter.get_text_documents()
        with ThreadPoolExecutor() as pool:
            list(pool.map(self._process_file, range(len(paths)), paths))

    def _process_file(self, doc_id: int, path: str) -> None:
        try:
            raw = (self.converter.base_dir / path).read_bytes()
        except OSError:
            return
        counts = Counter(
            word.decode("utf-8", errors="surrogateescape") for word in raw.split()
        )
        with self._lock:
            for word, count in counts.items():
                per_doc = self._freq.setdefault(word, {})
                per_doc[doc_id] = per_doc.get(doc_id, 0) + count

    def get_word_count(self, word: str) -> dict[int, int]:
        """Return a mapping of document id to occurrence count for ``word``."""
        with self._lock:
            return dict(self._freq.get(word, {}))
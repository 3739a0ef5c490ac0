"""Reading the configuration and requests, writing answers as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Sequence

CONFIG_FILE = "config.json"
REQUESTS_FILE = "requests.json"
ANSWERS_FILE = "answers.json"

_REQUIRED_CONFIG_FIELDS = ("name", "version", "max_responses")


class ConfigError(RuntimeError):
    """Raised when a configuration or request file is missing or malformed."""


def _is_empty(data: Any) -> bool:
    return data is None or (isinstance(data, (dict, list)) and not data)


class ConverterJSON:
    """Access to ``config.json``, ``requests.json`` and ``answers.json`` in a directory."""

    def __init__(self, base_dir=None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path(".")
        self._files: list[str] | None = None
        self._requests: Any = None
        self._requests_loaded = False

    def _parse(self, name: str) -> Any:
        path = self.base_dir / name
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigError(f"Could not open {name}") from exc
        try:
            return json.loads(raw)
        except ValueError as exc:
            raise ConfigError(f"Invalid JSON in {name}: {exc}") from exc

    def _load_config(self) -> list[str]:
        if self._files is not None:
            return self._files

        if not (self.base_dir / CONFIG_FILE).exists():
            raise ConfigError("config file is missing")

        data = self._parse(CONFIG_FILE)
        if _is_empty(data):
            raise ConfigError("config file is empty")
        if not isinstance(data, dict) or "config" not in data:
            raise ConfigError("config file: missing 'config' section")

        config = data["config"]
        if not isinstance(config, dict) or any(
            field not in config for field in _REQUIRED_CONFIG_FIELDS
        ):
            raise ConfigError("config file: missing required fields in 'config' section")

        if "files" not in data:
            raise ConfigError("config file: missing 'files' section")
        files = data["files"]
        if not isinstance(files, list) or not files:
            raise ConfigError("config file: 'files' must be non-empty array")
        if not all(isinstance(name, str) for name in files):
            raise ConfigError("config file: 'files' must contain only strings")

        self._files = list(files)
        return self._files

    def _load_requests(self) -> Any:
        if not self._requests_loaded:
            if (self.base_dir / REQUESTS_FILE).exists():
                self._requests = self._parse(REQUESTS_FILE)
            else:
                self._requests = {}
            self._requests_loaded = True
        return self._requests

    def get_text_documents(self) -> list[str]:
        """Return the document paths listed in the configuration."""
        return list(self._load_config())

    def get_requests(self) -> list[str]:
        """Return the search requests, or an empty list if there are none."""
        data = self._load_requests()
        if not isinstance(data, dict) or "requests" not in data:
            return []
        requests = data["requests"]
        if not isinstance(requests, list) or not all(isinstance(r, str) for r in requests):
            raise ConfigError("requests file: 'requests' must be an array of strings")
        return list(requests)

    def put_answers(self, answers: Iterable[Sequence[Sequence[Any]]]) -> Path:
        """Write ``(doc_id, rank)`` results per request to ``answers.json``."""
        result: dict[str, dict[str, Any]] = {}
        for number, answer in enumerate(answers, start=1):
            pairs = [(int(doc_id), float(rank)) for doc_id, rank in answer]
            key = f"request{number}"
            if not pairs:
                result[key] = {"result": "false"}
            elif len(pairs) > 1:
                result[key] = {
                    "result": "true",
                    "relevance": [{"docid": d, "rank": r} for d, r in pairs],
                }
            else:
                doc_id, rank = pairs[0]
                result[key] = {"result": "true", "docid": doc_id, "rank": rank}

        path = self.base_dir / ANSWERS_FILE
        path.write_text(
            json.dumps({"answers": result}, indent=4, sort_keys=True), encoding="utf-8"
        )
        print(f"Data successfully written to {ANSWERS_FILE}")
        return path
"""Command line entry point: index documents, answer requests, save answers."""

from __future__ import annotations

import argparse
import sys

from searchengine.converter import ConfigError, ConverterJSON
from searchengine.inverted_index import InvertedIndex
from searchengine.search_server import SearchServer


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="searchengine",
        description="Search the configured documents and write answers.json.",
    )
    parser.add_argument(
        "--base-dir",
        default=".",
        help="directory holding config.json and requests.json (default: current)",
    )
    args = parser.parse_args(argv)

    try:
        converter = ConverterJSON(args.base_dir)
        index = InvertedIndex(converter)
        server = SearchServer(index)

        print("Starting SearchEngine...")
        print("Indexing documents...")
        index.update_document_base()

        print("Processing requests...")
        results = server.search(converter.get_requests())

        print("Saving results...")
        converter.put_answers(results)

        print("Search completed. Results saved to answers.json")
        return 0
    except (ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
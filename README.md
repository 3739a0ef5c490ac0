# searchengine

A small local full-text search engine. It reads a list of text files from
`config.json`, builds an inverted index of the words in them, runs the
queries listed in `requests.json` against that index, and writes ranked
results to `answers.json`.

## Installation

    pip install .

## Input files

`config.json`, `requests.json` and `answers.json` live in one base
directory: the working directory by default, or the one given with
`--base-dir`. Document paths in `config.json` are taken relative to that
directory as well.

`config.json` lists the documents to index. It must be valid, non-empty
JSON with a `config` section holding `name`, `version` and
`max_responses`, and a `files` section that is a non-empty array of
strings:

    {
        "config": {"name": "MySearch", "version": "1.0", "max_responses": 5},
        "files": ["docs/file1.txt", "docs/file2.txt"]
    }

Documents are numbered from 0 in the order they are listed. A listed file
that cannot be read is skipped and simply matches nothing.

`requests.json` holds the queries. If the file is missing, or it has no
`requests` key, no queries are run. If `requests` is present it must be an
array of strings:

    {"requests": ["milk water", "sugar"]}

## Running

    searchengine
    searchengine --base-dir path/to/dir

This indexes the documents, answers every request and writes
`answers.json` (keys sorted, indented by four spaces):

    {
        "answers": {
            "request1": {
                "relevance": [
                    {
                        "docid": 2,
                        "rank": 1.0
                    },
                    {
                        "docid": 0,
                        "rank": 0.7
                    }
                ],
                "result": "true"
            },
            "request2": {
                "result": "false"
            }
        }
    }

A request with exactly one matching document gets `docid` and `rank`
directly instead of a `relevance` list. Progress messages go to standard
output. If the configuration or requests file is missing, unreadable or
invalid, an `Error: ...` line is printed to standard error and the exit
status is 1.

## How ranking works

Each query is split on whitespace. Trailing punctuation is stripped from
each word, empty words are dropped, and repeated words count once. Documents
are split on whitespace only, and words are matched exactly (case
sensitive). A document matches if it holds any of the query words. Its
absolute relevance is the sum of how many times each query word occurs in
it. Ranks are divided by the highest absolute relevance, so the best
document has rank 1.0. Results are sorted by rank, highest first, with ties
in order of document id.

## Library use

    from searchengine.converter import ConverterJSON
    from searchengine.inverted_index import InvertedIndex
    from searchengine.search_server import SearchServer

    converter = ConverterJSON(".")
    index = InvertedIndex(converter)
    server = SearchServer(index)

    results = server.search(["milk water"])
    for hits in results:
        for hit in hits:
            print(hit.doc_id, hit.rank)

    converter.put_answers(results)

- `ConverterJSON(base_dir=None)` reads files from `base_dir` (the working
  directory when omitted). `get_text_documents()` returns the document
  paths, `get_requests()` returns the queries, and `put_answers(answers)`
  takes one sequence of `(doc_id, rank)` pairs per request, writes
  `answers.json` and returns its path. Problems with the input files raise
  `ConfigError`, a subclass of `RuntimeError`.
- `InvertedIndex(converter=None)` builds its index with
  `update_document_base()`, reading documents in parallel threads.
  `get_word_count(word)` returns a new dict mapping document id to the
  number of times the word occurs in that document; unknown words give an
  empty dict.
- `SearchServer(index).search(requests)` rebuilds the index and returns,
  for each request, a list of `RelativeIndex(doc_id, rank)` named tuples.

## Limitations

`max_responses` must be present in `config.json`, but it is not used:
every matching document is returned and written. There is no stemming,
case folding or stop-word handling, and the index is held in memory only;
it is rebuilt on every search.
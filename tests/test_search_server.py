import json

import pytest

from searchengine.converter import ConverterJSON
from searchengine.inverted_index import InvertedIndex
from searchengine.search_server import RelativeIndex, SearchServer


def _setup(directory, documents):
    names = []
    for i, text in enumerate(documents):
        name = f"doc_{i}.txt"
        (directory / name).write_text(text)
        names.append(name)
    config = {
        "config": {"name": "Test", "version": "1.0", "max_responses": 5},
        "files": names,
    }
    (directory / "config.json").write_text(json.dumps(config))
    return SearchServer(InvertedIndex(ConverterJSON(directory)))


@pytest.fixture
def server(tmp_path):
    return _setup(tmp_path, ["apple banana apple", "banana cherry", "cherry cherry cherry"])


def test_single_word(server):
    results = server.search(["apple"])
    assert len(results) == 1
    assert len(results[0]) == 1
    assert results[0][0].doc_id == 0
    assert results[0][0].rank == pytest.approx(1.0)


def test_multi_word_query(server):
    results = server.search(["banana cherry"])
    assert len(results) == 1
    assert [r.doc_id for r in results[0]] == [2, 1, 0]
    assert results[0][0].rank == pytest.approx(1.0)
    assert results[0][1].rank == pytest.approx(2.0 / 3)
    assert results[0][2].rank == pytest.approx(1.0 / 3)


def test_punctuation_in_queries(server):
    results = server.search(["apple,", "banana! ?"])
    assert len(results) == 2
    assert len(results[0]) == 1
    assert results[0][0].doc_id == 0
    assert len(results[1]) == 2


def test_unknown_words(server):
    assert server.search(["nonexistent"]) == [[]]


def test_empty_queries(server):
    assert server.search(["", "   ", ",.!"]) == [[], [], []]


def test_multiple_requests(server):
    results = server.search(["apple", "banana", "cherry"])
    assert len(results) == 3
    assert results[0][0].doc_id == 0
    assert len(results[1]) == 2
    assert len(results[2]) == 2


def test_repeated_words_count_once(server):
    assert server.search(["apple apple"]) == server.search(["apple"])


def test_simple(tmp_path):
    srv = _setup(
        tmp_path,
        [
            "milk milk milk milk water water water",
            "milk water water",
            "milk milk milk milk milk water water water water water",
            "americano cappuccino",
        ],
    )
    result = srv.search(["milk water", "sugar"])
    assert len(result) == 2
    assert [r.doc_id for r in result[0]] == [2, 0, 1]
    assert result[0][0].rank == pytest.approx(1.0, abs=0.001)
    assert result[0][1].rank == pytest.approx(0.7, abs=0.001)
    assert result[0][2].rank == pytest.approx(0.3, abs=0.001)
    assert result[1] == []


def test_basic_ranking(tmp_path):
    docs = [
        "moscow is the capital of russia",
        "welcome to moscow the capital of russia",
        "paris is the capital of france",
    ]
    srv = _setup(tmp_path, docs)
    result = srv.search(["moscow russia"])
    assert len(result) == 1
    assert result[0]
    ranks = [r.rank for r in result[0]]
    assert ranks == sorted(ranks, reverse=True)
    top = docs[result[0][0].doc_id]
    assert "moscow" in top or "russia" in top


def test_relative_index_equality():
    assert RelativeIndex(1, 0.5) == RelativeIndex(doc_id=1, rank=0.5)
    assert tuple(RelativeIndex(3, 1.0)) == (3, 1.0)
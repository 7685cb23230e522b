from __future__ import annotations

import pytest

from opensearch_type import Document, Mapping, Query, ResultSet, Search


def test_query_create_shapes():
    assert Query.create(None).to_dict() == {"query": {"match_all": {}}}
    assert Query.create("").to_dict() == {"query": {"match_all": {}}}
    assert Query.create("kim").query == {"query_string": {"query": "kim"}}
    assert Query.create({"term": {"user": "kim"}}).to_dict() == {"query": {"term": {"user": "kim"}}}

    body = {"query": {"match": {"text": "hi"}}, "size": 3}
    assert Query.create(body).to_dict() == body

    query = Query()
    assert Query.create(query) is query

    with pytest.raises(TypeError):
        Query.create(42)


def test_create_search_is_scoped_and_offline(tweets, transport):
    search = tweets.create_search("kim", {"limit": 5, "from": 10, "routing": "r1"})

    assert isinstance(search, Search)
    assert search.indices == ["idx"]
    assert search.types == ["tweet"]
    assert search.query.to_dict() == {
        "query": {"query_string": {"query": "kim"}},
        "size": 5,
        "from": 10,
    }
    assert search.options == {"routing": "r1"}
    assert transport.calls == []


def test_search_executes_and_wraps_hits(tweets, transport):
    transport.reply(
        {
            "took": 2,
            "hits": {
                "total": {"value": 2, "relation": "eq"},
                "max_score": 1.5,
                "hits": [{"_id": "1"}, {"_id": "2"}],
            },
        }
    )

    results = tweets.search({"term": {"user": "kim"}}, 10)

    call = transport.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "/idx/tweet/_search"
    assert call["body"] == {"query": {"term": {"user": "kim"}}, "size": 10}
    assert isinstance(results, ResultSet)
    assert results.total_hits == 2
    assert results.max_score == 1.5
    assert results.took == 2
    assert len(results) == 2
    assert [hit["_id"] for hit in results] == ["1", "2"]


def test_result_set_accepts_legacy_total(tweets, transport):
    transport.reply({"hits": {"total": 7, "hits": []}})
    assert tweets.search().total_hits == 7


def test_count(tweets, transport):
    transport.reply({"count": 12})

    assert tweets.count("kim") == 12
    call = transport.calls[0]
    assert call["url"] == "/idx/tweet/_count"
    assert call["body"] == {"query": {"query_string": {"query": "kim"}}}


def test_more_like_this(tweets, transport):
    transport.reply({"hits": {"total": 1, "hits": [{"_id": "9"}]}})
    doc = Document(id="3")

    results = tweets.more_like_this(doc, {"mlt_fields": "text", "min_term_freq": 1}, {"term": {"lang": "en"}})

    call = transport.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "/idx/tweet/3/_mlt"
    assert call["params"] == {"mlt_fields": "text", "min_term_freq": 1}
    assert call["body"] == {"query": {"term": {"lang": "en"}}}
    assert results.query.query == {"term": {"lang": "en"}}
    assert len(results) == 1


def test_set_mapping_from_properties(tweets, transport):
    tweets.set_mapping({"user": {"type": "keyword"}, "text": {"type": "text"}})

    call = transport.calls[0]
    assert call["method"] == "PUT"
    assert call["url"] == "/idx/tweet/_mapping"
    assert call["body"] == {
        "tweet": {"properties": {"user": {"type": "keyword"}, "text": {"type": "text"}}}
    }


def test_set_mapping_object_with_params(tweets, transport):
    mapping = Mapping(properties={"user": {"type": "keyword"}})
    mapping.set_param("_source", {"enabled": False})

    tweets.set_mapping(mapping)

    assert mapping.type is tweets
    assert transport.calls[0]["body"] == {
        "tweet": {"properties": {"user": {"type": "keyword"}}, "_source": {"enabled": False}}
    }


def test_mapping_create_splits_params():
    mapping = Mapping.create({"properties": {"a": {"type": "long"}}, "_routing": {"required": True}})
    assert mapping.properties == {"a": {"type": "long"}}
    assert mapping.params == {"_routing": {"required": True}}
    with pytest.raises(ValueError):
        mapping.to_dict()


def test_get_mapping(tweets, transport):
    transport.reply({"idx": {"mappings": {"tweet": {"properties": {}}}}})

    assert tweets.get_mapping() == {"idx": {"mappings": {"tweet": {"properties": {}}}}}
    assert transport.calls[0]["method"] == "GET"
    assert transport.calls[0]["url"] == "/idx/tweet/_mapping"

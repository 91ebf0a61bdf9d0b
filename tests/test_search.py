import json

import pytest

from aps.appcenter import search
from aps.exceptions import UsageError
from aps.search import SearchQuery, build_payload, parse_search_args


@pytest.mark.parametrize("args", [
    ["firefox", "page:3", "category:Network"],
    ["category:Network", "firefox", "page:3"],
    ["page:3", "category:Network", "firefox"],
])
def test_page_and_category_independent_of_order(args):
    payload = build_payload(parse_search_args(args))
    assert payload == {
        "query": "firefox",
        "filters": [{"filterType": "main_categories", "value": "Network"}],
        "hits_per_page": 21,
        "page": 3,
    }


def test_defaults_page_one_and_no_filters():
    payload = build_payload(parse_search_args(["gimp"]))
    assert payload["page"] == 1
    assert payload["filters"] == []


@pytest.mark.parametrize("extra", [[], ["page:4"], ["category:Game"], ["page:2", "category:Office"]])
def test_home_sends_empty_query(extra):
    payload = build_payload(parse_search_args(["home"] + extra))
    assert payload["query"] == ""


def test_home_keeps_page_and_filters():
    payload = build_payload(parse_search_args(["page:2", "home", "category:Game"]))
    assert payload["page"] == 2
    assert payload["filters"] == [{"filterType": "main_categories", "value": "Game"}]


def test_last_free_text_token_wins():
    assert parse_search_args(["vlc", "mpv"]).text == "mpv"


def test_category_only_is_enough():
    query = parse_search_args(["category:Education"])
    assert query == SearchQuery(text="", page=1, category="Education")
    assert build_payload(query)["query"] == ""


@pytest.mark.parametrize("args", [[], ["page:2"], ["category:"], [""]])
def test_missing_text_and_category_is_usage_error(args):
    with pytest.raises(UsageError, match="Search query or category is required"):
        parse_search_args(args)


@pytest.mark.parametrize("value", ["abc", "", "0", "-1", "1.5"])
def test_bad_page_is_usage_error(value):
    with pytest.raises(UsageError, match="Invalid page number"):
        parse_search_args(["firefox", f"page:{value}"])


def test_search_passes_body_through(capsys, fake_client):
    body = '{"hits": [{"app_id": "org.gimp.GIMP"}], "totalHits": 1}'
    client = fake_client(search=body)

    search(["gimp", "page:2"], client=client)

    out, err = capsys.readouterr()
    assert out == body
    assert err == ""
    assert client.calls == [("search", {
        "query": "gimp", "filters": [], "hits_per_page": 21, "page": 2,
    })]


def test_search_passes_invalid_body_through_untouched(capsys, fake_client):
    search(["gimp"], client=fake_client(search="<html>502</html>"))
    assert capsys.readouterr().out == "<html>502</html>"


def test_search_without_query_exits_with_stderr_only(capsys, fake_client):
    client = fake_client()
    with pytest.raises(SystemExit) as exc:
        search(["page:2"], client=client)

    out, err = capsys.readouterr()
    assert exc.value.code == 1
    assert out == ""
    assert "Search query or category is required." in err
    assert client.calls == []

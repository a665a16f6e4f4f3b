from jupyverse_client.utils import (
    json_to_query_string,
    url_escape,
    url_join_encode,
    url_path_join,
)


def test_url_path_join():
    assert url_path_join("a/", "", "b") == "a/b"
    assert url_path_join("", "x") == "x"
    assert url_path_join("a", "b") == "a/b"
    assert url_path_join() == ""
    assert url_path_join("", "") == ""


def test_url_path_join_boundaries():
    assert url_path_join("http://localhost:8888", "api/contents") == (
        "http://localhost:8888/api/contents"
    )
    assert url_path_join("http://localhost:8888/", "/api/contents") == (
        "http://localhost:8888/api/contents"
    )
    assert url_path_join("a", "//b") == "a/b"
    assert url_path_join("/a", "b/") == "/a/b/"
    # only boundaries are touched
    assert url_path_join("a//b", "c//d") == "a//b/c//d"


def test_url_escape():
    assert url_escape("a b/c d") == "a%20b/c%20d"
    assert url_escape("/nb.ipynb") == "/nb.ipynb"
    assert url_escape("dir/100%.txt") == "dir/100%25.txt"
    assert url_escape("a?b#c&d") == "a%3Fb%23c%26d"
    assert url_escape("(draft)~*.txt") == "(draft)~*.txt"
    assert url_escape("café/ü") == "caf%C3%A9/%C3%BC"


def test_url_join_encode():
    assert url_join_encode("my dir", "a b.ipynb", "checkpoints") == (
        "my%20dir/a%20b.ipynb/checkpoints"
    )


def test_json_to_query_string():
    assert json_to_query_string({"a": "1", "b": "x y"}) == "?a=1&b=x%20y"
    assert json_to_query_string({}) == "?"
    assert json_to_query_string({"a b": "c&d", "n": 0}) == "?a%20b=c%26d&n=0"

import pytest

from oaspec.path import ApiPath, PathError


@pytest.mark.parametrize("text", ["/", "/pets", "/pets/{petId}/toys"])
def test_parse_round_trip(text):
    assert str(ApiPath.parse(text)) == text


def test_parse_rejects_relative():
    with pytest.raises(PathError, match="must begin with forward slash"):
        ApiPath.parse("pets/{petId}")


def test_parse_accepts_empty_string():
    assert ApiPath.parse("").value == ""


def test_equal_paths_hash_alike():
    paths = {ApiPath.parse("/a"), ApiPath.parse("/a"), ApiPath.parse("/b")}
    assert len(paths) == 2


def test_parse_rejects_non_string():
    with pytest.raises(ValueError):
        ApiPath.parse(42)
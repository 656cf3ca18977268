import pytest

from oaspec.primitives import (
    SchemaError,
    expect_bool,
    expect_false,
    expect_mapping,
    expect_string,
    expect_true,
    expect_uri,
    expect_uri_reference,
)


def test_expect_true_accepts_true():
    assert expect_true(True) is True


def test_expect_true_rejects_false():
    with pytest.raises(SchemaError, match="must be true but set to false"):
        expect_true(False)


def test_expect_true_rejects_non_bool():
    with pytest.raises(SchemaError, match="MUST be boolean with true value"):
        expect_true("true")


def test_expect_false_accepts_false():
    assert expect_false(False) is False


def test_expect_false_rejects_true():
    with pytest.raises(SchemaError, match="must be false but set to true"):
        expect_false(True)


def test_expect_false_rejects_non_bool():
    with pytest.raises(SchemaError, match="MUST be boolean with false value"):
        expect_false(0)


@pytest.mark.parametrize("value", [True, False])
def test_expect_bool_round_trip(value):
    assert expect_bool(value) is value


def test_expect_bool_rejects_int():
    with pytest.raises(SchemaError):
        expect_bool(1)


def test_expect_string_round_trip():
    assert expect_string("pets") == "pets"


def test_expect_string_rejects_number():
    with pytest.raises(SchemaError, match="String type"):
        expect_string(3)


def test_expect_mapping_returns_same_object():
    data = {"a": 1}
    assert expect_mapping(data) is data


def test_expect_mapping_rejects_list():
    with pytest.raises(SchemaError):
        expect_mapping([1, 2])


@pytest.mark.parametrize(
    "uri",
    [
        "https://example.com/docs?page=1#top",
        "http://[::1]:8080/",
        "mailto:someone@example.com",
        "http://user@example.com:80/a%20b",
    ],
)
def test_expect_uri_accepts_absolute(uri):
    assert expect_uri(uri) == uri


def test_expect_uri_rejects_relative():
    with pytest.raises(SchemaError, match="scheme"):
        expect_uri("/relative/path")


@pytest.mark.parametrize(
    "uri",
    [
        "http://example.com:99999/",
        "http://example.com:port/",
        "http://exa mple.com/",
        "http://example.com/%zz",
        "1http://example.com/",
        "http://[::1/",
    ],
)
def test_expect_uri_rejects_malformed(uri):
    with pytest.raises(SchemaError):
        expect_uri(uri)


@pytest.mark.parametrize(
    "ref",
    ["#/components/schemas/Pet", "other.yaml#/Pet", "../x", "", "https://example.com/a"],
)
def test_expect_uri_reference_accepts(ref):
    assert expect_uri_reference(ref) == ref


def test_expect_uri_reference_rejects_space():
    with pytest.raises(SchemaError):
        expect_uri_reference("#/a b")
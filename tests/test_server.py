import pytest

from oaspec.primitives import SchemaError
from oaspec.server import Server, ServerVariable


def test_server_with_variables():
    server = Server.from_dict(
        {
            "url": "https://{region}.example.com",
            "descriptor": "Regional server",
            "variables": {
                "region": {"default": "eu", "enum": ["eu", "us"], "description": "Region"}
            },
        }
    )
    assert server.url == "https://{region}.example.com"
    assert server.descriptor == "Regional server"
    assert server.variables == {
        "region": ServerVariable(default="eu", enum=("eu", "us"), description="Region")
    }


def test_server_minimal():
    server = Server.from_dict({"url": "/v1"})
    assert server == Server(url="/v1")
    assert server.variables is None


def test_description_key_is_not_descriptor():
    server = Server.from_dict({"url": "/v1", "description": "ignored"})
    assert server.descriptor is None


def test_server_requires_url():
    with pytest.raises(SchemaError):
        Server.from_dict({"descriptor": "x"})


def test_server_url_must_be_string():
    with pytest.raises(SchemaError):
        Server.from_dict({"url": 5})


def test_variable_requires_default():
    with pytest.raises(SchemaError):
        ServerVariable.from_dict({"enum": ["a"]})


def test_variable_enum_must_be_sequence():
    with pytest.raises(SchemaError):
        ServerVariable.from_dict({"default": "a", "enum": "a"})


def test_variable_without_enum():
    variable = ServerVariable.from_dict({"default": "8080"})
    assert variable.enum is None
    assert variable.default == "8080"
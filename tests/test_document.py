import pytest

from oaspec.common import Reference
from oaspec.data_type import ActualType, IntegerFormat, IntegerType, ObjectType, StringType
from oaspec.document import Components, Description, load_description, load_description_file
from oaspec.http_status_code import Specific
from oaspec.parameter import ParameterLocation
from oaspec.path import ApiPath, PathError
from oaspec.primitives import SchemaError
from oaspec.server import Server
from oaspec.sref import Sref
from oaspec.version import Version, VersionError

SPEC = """
openapi: 3.0.3
info:
  title: Pet Store
  version: 1.0.0
servers:
  - url: https://api.example.com/v1
paths:
  /pets:
    get:
      operationId: listPets
      parameters:
        - name: limit
          in: query
          style: form
          schema:
            type: integer
            format: int32
      responses:
        '200':
          description: A list of pets
        default:
          description: unexpected error
components:
  schemas:
    Pet:
      type: object
      properties:
        id:
          type: integer
          format: int64
        name:
          type: string
    Pets:
      type: array
      items:
        $ref: '#/components/schemas/Pet'
"""


@pytest.fixture
def spec():
    return load_description(SPEC)


def test_header_fields(spec):
    assert spec.openapi == Version(3, 0, 3)
    assert spec.info.title == "Pet Store"
    assert spec.info.version == "1.0.0"
    assert spec.servers == (Server(url="https://api.example.com/v1"),)


def test_paths_and_operations(spec):
    assert list(spec.paths) == [ApiPath("/pets")]
    operation = spec.paths[ApiPath("/pets")].get
    assert operation.operation_id == "listPets"
    (parameter,) = operation.parameters
    assert parameter.name == "limit"
    assert parameter.location is ParameterLocation.QUERY
    assert operation.responses.codes[Specific(200)].description == "A list of pets"
    assert operation.responses.default.description == "unexpected error"


def test_component_schemas(spec):
    schemas = spec.components.schemas
    assert list(schemas) == ["Pet", "Pets"]
    pet = schemas["Pet"]
    assert isinstance(pet, ActualType)
    assert isinstance(pet.schema, ObjectType)
    assert list(pet.schema.properties) == ["id", "name"]
    assert pet.schema.properties["id"].schema == IntegerType(format=IntegerFormat.INT64)
    assert pet.schema.properties["name"].schema == StringType()


def test_servers_default_to_empty():
    spec = Description.from_dict({"openapi": "3.1.0", "info": {"title": "T", "version": "v"}})
    assert spec.servers == ()
    assert spec.paths is None
    assert spec.components is None


def test_components_of_every_kind():
    components = Components.from_dict(
        {
            "responses": {"NotFound": {"$ref": "#/r"}},
            "parameters": {"Id": {"$ref": "#/p"}},
            "requestBodies": {"Body": {"$ref": "#/b"}},
            "headers": {"Rate": {"$ref": "#/h"}},
        }
    )
    assert components.responses == {"NotFound": Reference(Sref("#/r"))}
    assert components.parameters == {"Id": Reference(Sref("#/p"))}
    assert components.request_bodies == {"Body": Reference(Sref("#/b"))}
    assert components.headers == {"Rate": Reference(Sref("#/h"))}
    assert components.schemas is None


@pytest.mark.parametrize("missing", ["openapi", "info"])
def test_required_fields(missing):
    data = {"openapi": "3.0.0", "info": {"title": "T", "version": "v"}}
    del data[missing]
    with pytest.raises(SchemaError):
        Description.from_dict(data)


def test_bad_version():
    with pytest.raises(VersionError):
        Description.from_dict({"openapi": "3.x.0", "info": {"title": "T", "version": "v"}})


def test_path_must_start_with_slash():
    with pytest.raises(PathError):
        Description.from_dict(
            {"openapi": "3.0.0", "info": {"title": "T", "version": "v"}, "paths": {"pets": {}}}
        )


def test_servers_null_rejected():
    with pytest.raises(SchemaError):
        Description.from_dict(
            {"openapi": "3.0.0", "info": {"title": "T", "version": "v"}, "servers": None}
        )


def test_invalid_yaml():
    with pytest.raises(SchemaError):
        load_description("openapi: [unclosed")


def test_non_mapping_document():
    with pytest.raises(SchemaError):
        load_description("- a\n- b\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "openapi.yaml"
    path.write_text(SPEC, encoding="utf-8")
    assert load_description_file(path) == load_description(SPEC)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_description_file(tmp_path / "absent.yaml")
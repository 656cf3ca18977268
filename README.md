# oaspec

`oaspec` reads OpenAPI specification documents written in YAML or JSON and
turns them into typed, immutable Python objects. Each part of the document is
checked as it is read:

- `openapi` must be a `major.minor.patch` version.
- Every key under `paths` must begin with `/`.
- Response keys must be status codes in the range 100–599, or the patterns
  `1XX` to `5XX`, or `default`.
- A `$ref` must be a valid URI reference. URLs in `info`, `contact`, `license`
  and `externalDocs` must be absolute URIs.
- A parameter with `in: path` must carry `required: true`.

A document that breaks one of these rules raises an error. The error says why.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
oaspec openapi.yaml
```

The command parses the named document. If no path is given, it reads
`openapi.yaml` from the current directory. It then prints the `repr` of each
schema under `components.schemas`, in document order. Each schema is printed
after a blank line. If the file cannot be read or the document does not
conform, the command writes `Error: ...` to standard error and exits with
status 1.

## Library use

```python
from oaspec.document import load_description, load_description_file

spec = load_description_file("openapi.yaml")
print(spec.openapi)          # e.g. 3.1.0
print(spec.info.title)

if spec.paths:
    for path, item in spec.paths.items():
        for method, operation in item.operations().items():
            print(method, path, operation.operation_id)

if spec.components and spec.components.schemas:
    for name, schema in spec.components.schemas.items():
        print(name, schema)
```

`load_description` takes the document text instead of a file path.
`Description.from_dict` takes a mapping that has already been decoded.

Each part of a document can also be parsed on its own:

- `oaspec.version.Version.parse`
- `oaspec.path.ApiPath.parse`
- `oaspec.sref.Sref.parse`
- `oaspec.http_status_code.parse_status_code`
- `oaspec.data_type.parse_data_type`
- the `from_dict` class methods of the objects in `oaspec.common`,
  `oaspec.media`, `oaspec.parameter`, `oaspec.operation`, `oaspec.server`,
  `oaspec.info` and `oaspec.path_item`

Every error raised while parsing derives from `oaspec.primitives.SchemaError`,
which is a `ValueError`.

## What it does not do

`oaspec` parses and validates documents. It does not generate code from them.
It also does not resolve `$ref` pointers. References are kept as `Sref` values.

Under `components`, it reads only these sections:

- `schemas`
- `responses`
- `parameters`
- `requestBodies`
- `headers`

Other sections, such as `examples`, `securitySchemes`, `links` and
`callbacks`, are ignored. Security requirements and top-level `tags` are
ignored as well.
import pytest

from oaspec.info import Contact, Info, License
from oaspec.primitives import SchemaError


def test_full_info():
    info = Info.from_dict(
        {
            "title": "Pet Store",
            "version": "1.0.0",
            "description": "Pets",
            "termsOfService": "https://example.com/terms",
            "contact": {
                "name": "Team",
                "url": "https://example.com/contact",
                "email": "team@example.com",
            },
            "license": {"name": "MIT", "url": "https://example.com/licence"},
        }
    )
    assert info.title == "Pet Store"
    assert info.version == "1.0.0"
    assert info.description == "Pets"
    assert info.terms_of_service == "https://example.com/terms"
    assert info.contact == Contact("Team", "https://example.com/contact", "team@example.com")
    assert info.license == License("MIT", "https://example.com/licence")


def test_minimal_info():
    info = Info.from_dict({"title": "T", "version": "v"})
    assert info == Info(title="T", version="v")


@pytest.mark.parametrize("missing", ["title", "version"])
def test_required_fields(missing):
    data = {"title": "T", "version": "v"}
    del data[missing]
    with pytest.raises(SchemaError):
        Info.from_dict(data)


def test_terms_of_service_must_be_absolute_uri():
    with pytest.raises(SchemaError):
        Info.from_dict({"title": "T", "version": "v", "termsOfService": "terms"})


def test_contact_url_validated():
    with pytest.raises(SchemaError):
        Contact.from_dict({"url": "http://exa mple.com"})


def test_empty_contact():
    assert Contact.from_dict({}) == Contact()


def test_license_requires_name():
    with pytest.raises(SchemaError):
        License.from_dict({"url": "https://example.com/licence"})


def test_version_must_be_string():
    with pytest.raises(SchemaError):
        Info.from_dict({"title": "T", "version": 1.0})
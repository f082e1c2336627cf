from __future__ import annotations

import pytest
from pydantic import ValidationError

from starter_cli.catalog import (
    CUSTOM_CHOICE,
    DEFAULT_CATALOG,
    DEFAULT_TEMPLATE,
    TemplateCatalog,
    TemplateSelection,
)
from starter_cli.errors import InvalidTemplateNameError, MissingCustomTemplateError, UnknownTemplateError


@pytest.fixture()
def catalog() -> TemplateCatalog:
    return TemplateCatalog(
        {
            "react-starter": "https://github.com/webpack/react-starter.git",
            "vue-starter": "https://example.com/vue-starter.git",
        }
    )


def test_default_catalog_contains_default_template():
    assert DEFAULT_TEMPLATE in DEFAULT_CATALOG
    assert DEFAULT_CATALOG[DEFAULT_TEMPLATE].endswith("react-starter.git")


def test_resolve_every_catalog_key(catalog: TemplateCatalog):
    for key in catalog:
        selection = catalog.resolve(key)
        assert selection == TemplateSelection(identifier=key, source_location=catalog[key])


def test_resolve_is_repeatable(catalog: TemplateCatalog):
    assert catalog.resolve("vue-starter") == catalog.resolve("vue-starter")


def test_choices_follow_insertion_order(catalog: TemplateCatalog):
    assert catalog.choices() == ["react-starter", "vue-starter", CUSTOM_CHOICE]


@pytest.mark.parametrize(
    "name, url",
    [("", "https://example.com/foo.git"), ("foo", ""), (None, None), ("   ", "url")],
)
def test_custom_requires_name_and_url(catalog: TemplateCatalog, name, url):
    with pytest.raises(MissingCustomTemplateError):
        catalog.resolve(CUSTOM_CHOICE, name, url)


def test_custom_pair_is_returned(catalog: TemplateCatalog):
    selection = catalog.resolve(CUSTOM_CHOICE, "foo", "https://example.com/foo.git")
    assert selection.identifier == "foo"
    assert selection.source_location == "https://example.com/foo.git"


def test_unknown_template(catalog: TemplateCatalog):
    with pytest.raises(UnknownTemplateError) as excinfo:
        catalog.resolve("angular-starter")
    assert excinfo.value.identifier == "angular-starter"


def test_catalog_is_read_only(catalog: TemplateCatalog):
    with pytest.raises(TypeError):
        catalog.entries["new"] = "https://example.com/new.git"  # type: ignore[index]


def test_selection_rejects_empty_fields():
    with pytest.raises(ValidationError):
        TemplateSelection(identifier="", source_location="https://example.com/x.git")


@pytest.mark.parametrize(
    "name",
    ["../evil", "/tmp/x", "a/b", "a\\b", "..", ".", "C:evil"],
)
def test_custom_name_must_be_single_folder(catalog: TemplateCatalog, name):
    with pytest.raises(InvalidTemplateNameError) as excinfo:
        catalog.resolve(CUSTOM_CHOICE, name, "https://example.com/foo.git")
    assert excinfo.value.name == name


def test_custom_name_with_dots_inside_is_accepted(catalog: TemplateCatalog):
    selection = catalog.resolve(CUSTOM_CHOICE, "my.template", "https://example.com/foo.git")
    assert selection.identifier == "my.template"

"""Tests for requirement parsing and package-name normalization."""
import pytest

from pyproject_workspace.workspace import InvalidRequirementError, normalize, parse_requirement


@pytest.mark.parametrize(
    "name,expected",
    [
        ("foo", "foo"),
        ("Foo", "foo"),
        ("foo_bar", "foo-bar"),
        ("foo.bar", "foo-bar"),
        ("Foo-._Bar", "foo-bar"),
        ("foo--bar__baz", "foo-bar-baz"),
    ],
)
def test_normalize(name, expected):
    assert normalize(name) == expected


def test_parse_requirement_keeps_raw_text():
    """Test: parsing keeps the name and the original text.

    Given: a specifier with extras, version and marker
    When: parse_requirement is called
    Then: name is the distribution name and raw is the input unchanged
    """
    text = "Foo_Bar[socks] >=1.0, <2 ; python_version >= '3.11'"
    spec = parse_requirement(text)

    assert spec.name == "Foo_Bar"
    assert spec.raw == text
    assert spec.normalized_name == "foo-bar"
    assert spec.requirement.extras == {"socks"}


def test_same_package_ignores_version_and_extras():
    assert parse_requirement("foo==1").same_package(parse_requirement("FOO[x]>2"))
    assert not parse_requirement("foo").same_package(parse_requirement("foobar"))


@pytest.mark.parametrize("text", ["", "   ", "!!bad", "foo>=", "foo bar"])
def test_parse_requirement_rejects_invalid(text):
    with pytest.raises(InvalidRequirementError):
        parse_requirement(text)

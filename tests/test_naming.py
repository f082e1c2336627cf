from __future__ import annotations

import pytest

from starter_cli.naming import check_app_name, validate_package_name


@pytest.mark.parametrize(
    "name",
    ["my-app", "some-package", "example.com", "under_score", "@npm/thingy", "a" * 214],
)
def test_valid_names(name):
    result = validate_package_name(name)
    assert result.valid_for_new_packages
    assert list(result.problems) == []


@pytest.mark.parametrize(
    "name, error",
    [
        ("", "name length must be greater than zero"),
        (".start-with-period", "name cannot start with a period"),
        ("_start-with-underscore", "name cannot start with an underscore"),
        (" leading-space", "name cannot contain leading or trailing spaces"),
        ("node_modules", "node_modules is a blacklisted name"),
        ("favicon.ico", "favicon.ico is a blacklisted name"),
        ("s/l/a/s/h/e/s", "name can only contain URL-friendly characters"),
        ("my app", "name can only contain URL-friendly characters"),
        ("café", "name can only contain URL-friendly characters"),
    ],
)
def test_names_with_errors(name, error):
    result = validate_package_name(name)
    assert error in result.errors
    assert not result.valid_for_old_packages
    assert not result.valid_for_new_packages


@pytest.mark.parametrize(
    "name, warning",
    [
        ("http", "http is a core module name"),
        ("CAPITAL-LETTERS", "name can no longer contain capital letters"),
        ("crazy!", "name can no longer contain special characters (\"~'!()*\")"),
        ("a" * 215, "name can no longer contain more than 214 characters"),
    ],
)
def test_names_with_warnings_only(name, warning):
    result = validate_package_name(name)
    assert result.errors == []
    assert warning in result.warnings
    assert result.valid_for_old_packages
    assert not result.valid_for_new_packages


def test_non_string_name():
    result = validate_package_name(None)
    assert result.errors == ["name must be a string"]


def test_problems_lists_errors_before_warnings():
    result = validate_package_name("My App")
    problems = list(result.problems)
    assert problems == [
        "name can only contain URL-friendly characters",
        "name can no longer contain capital letters",
    ]


def test_check_app_name_accepts_valid_name(capsys):
    check_app_name("my-app")
    assert capsys.readouterr().err == ""


def test_check_app_name_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        check_app_name("My App")

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert 'Cannot create a project named "My App"' in err
    assert "* name can no longer contain capital letters" in err
    assert "Please choose a different project name." in err


def test_undecodable_name_is_not_url_friendly():
    # os.fsdecode(b"caf\xe9") on a UTF-8 filesystem
    result = validate_package_name("caf\udce9")
    assert "name can only contain URL-friendly characters" in result.errors

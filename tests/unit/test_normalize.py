import pytest

from sitebuild.lib.normalize import clean_attributes, cleaned_path


def test_clean_attributes():
    raw = {
        " title ": "Logo",
        "binary": "false",
        "compress": "true",
        "custom_path": "none",
        1: "numeric key",
        "reps": {"thumb": {"width": 100, "binary": "true"}, "rss": "none"},
        "filters": ["resize", "none"],
    }

    cleaned = clean_attributes(raw)

    assert cleaned == {
        "title": "Logo",
        "binary": False,
        "compress": True,
        "custom_path": None,
        "1": "numeric key",
        "reps": {"thumb": {"width": 100, "binary": True}, "rss": None},
        "filters": ["resize", None],
    }

    # the input is left as it was
    assert raw["binary"] == "false"
    assert raw["reps"]["rss"] == "none"


def test_clean_attributes_empty():
    assert clean_attributes(None) == {}
    assert clean_attributes({}) == {}


def test_clean_attributes_not_mapping():
    with pytest.raises(ValueError, match="attributes must be a mapping, got list"):
        clean_attributes(["extension", "png"])


@pytest.mark.parametrize("raw_path, expected", [
    ("images/logo", "/images/logo/"),
    ("/images/logo/", "/images/logo/"),
    ("//images//logo//", "/images/logo/"),
    ("images\\logo", "/images/logo/"),
    ("", "/"),
    ("/", "/"),
])
def test_cleaned_path(raw_path, expected):
    assert cleaned_path(raw_path) == expected

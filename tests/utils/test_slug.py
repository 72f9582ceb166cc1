# tests/utils/test_slug.py

import pytest

from norwedfilm.utils.slug import generate_slug


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Emma & Lars", "emma-lars"),
        ("Bjørn & Åse", "bjorn-ase"),
        ("Kærlighet i Ålesund", "kaerlighet-i-alesund"),
        ("  Summer -- Wedding!  ", "summer-wedding"),
    ],
)
def test_generate_slug(title, expected):
    assert generate_slug(title) == expected


def test_generate_slug_fallback():
    assert generate_slug("&&&") == "item"
    assert generate_slug("", fallback="project") == "project"

"""Tests for ItemKeyIndex extraction from serguide links."""

from __future__ import annotations

import pytest

from services.link_parser import extract_item_key


def test_extracts_item_key() -> None:
    assert extract_item_key("https://serguide.maccabi4u.co.il/x?ItemKeyIndex=ABC123") == "ABC123"


def test_not_a_link_yields_empty() -> None:
    assert extract_item_key("not a link") == ""


def test_missing_parameter_yields_empty() -> None:
    assert extract_item_key("https://serguide.maccabi4u.co.il/x?foo=bar") == ""


@pytest.mark.parametrize(
    "link, expected",
    [
        ("https://serguide.maccabi4u.co.il/x?ItemKeyIndex=", ""),
        ("https://serguide.maccabi4u.co.il/x?itemkeyindex=ABC", ""),
        ("https://serguide.maccabi4u.co.il/x?a=1&ItemKeyIndex=aBc&b=2", "aBc"),
        ("https://serguide.maccabi4u.co.il/x?ItemKeyIndex=A%2FB", "A/B"),
        ("https://serguide.maccabi4u.co.il/x?ItemKeyIndex=first&ItemKeyIndex=second", "first"),
        ("  https://serguide.maccabi4u.co.il/x?ItemKeyIndex=77  ", "77"),
        ("serguide.maccabi4u.co.il/x?ItemKeyIndex=77", ""),
        ("http://[::1/x?ItemKeyIndex=77", ""),
        ("", ""),
    ],
)
def test_edge_cases(link: str, expected: str) -> None:
    assert extract_item_key(link) == expected


def test_other_hosts_are_accepted() -> None:
    # Only the query parameter matters, not where the link points.
    assert extract_item_key("https://example.com/?ItemKeyIndex=Z9") == "Z9"

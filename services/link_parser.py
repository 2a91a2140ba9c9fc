"""
services/link_parser.py
-----------------------
Pulls the doctor identifier out of a serguide link.

A subscription link looks like:
    https://serguide.maccabi4u.co.il/heb/doctors/doctorssearchresults/doctorsinfopage/?ItemKeyIndex=ABC123
and the doctor is identified by its `ItemKeyIndex` query parameter.
"""

from urllib.parse import parse_qs, urlsplit

from config import ITEM_KEY_PARAM


def extract_item_key(text: str, param: str = ITEM_KEY_PARAM) -> str:
    """
    Return the `ItemKeyIndex` value of a link, or "" if there is none.

    The value is returned as sent (after normal query-string decoding).
    Anything that is not an absolute URL yields "".
    """
    try:
        parsed = urlsplit(text.strip())
    except (AttributeError, ValueError):
        return ""
    if not parsed.scheme or not parsed.netloc:
        return ""

    values = parse_qs(parsed.query, keep_blank_values=True).get(param)
    return values[0] if values else ""

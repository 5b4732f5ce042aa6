"""
Verse text cleanup shared by all schema parsers.
"""

import re

# Translator-supplied words some sources wrap in braces, e.g. "{was}".
_ANNOTATION_RE = re.compile(r"\{[^}]*\}")
_WHITESPACE_RE = re.compile(r"\s+")


def clean(raw_text: str) -> str:
    """
    Remove {annotation} spans, collapse whitespace runs and trim.

    >>> clean("In the {beginning}  God created")
    'In the God created'
    """
    if not raw_text:
        return ""
    text = _ANNOTATION_RE.sub("", str(raw_text))
    return _WHITESPACE_RE.sub(" ", text).strip()

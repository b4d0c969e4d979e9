"""Label normalization shared by every ingredient/inventory comparison."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^\w\s-]")


def normalize_label(label: str | None) -> str:
    """Canonicalize a free-text ingredient or inventory name for matching.

    Lower-cases, drops every character that is not a word character,
    whitespace or a hyphen, collapses whitespace runs to one space and trims.
    ``None`` and empty input give ``""``.

    Matching is exact on the result; two labels refer to the same thing only
    when their normalized forms are equal. ``normalize_label`` is idempotent.
    """
    if not label:
        return ""
    stripped = _DISALLOWED.sub("", label.lower())
    return _WHITESPACE_RUN.sub(" ", stripped).strip()

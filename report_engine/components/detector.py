from __future__ import annotations

from typing import Iterable, List, Sequence

NOT_FOUND = -1


def _matches(header: str, keywords: Sequence[str]) -> bool:
    text = str(header).lower()
    return any(keyword.lower() in text for keyword in keywords)


def matching_columns(headers: Iterable[str], keywords: Sequence[str]) -> List[int]:
    return [idx for idx, header in enumerate(headers) if header is not None and _matches(header, keywords)]


def find_column(headers: Iterable[str], keywords: Sequence[str], *, strict: bool = False) -> int:
    """Index of the first header containing any keyword, case-insensitively.

    First match wins even when a later header fits better. With ``strict=True``
    an ambiguous group (more than one matching header) counts as not found.
    Returns ``NOT_FOUND`` (-1) when nothing matches.
    """
    matches = matching_columns(headers, keywords)
    if not matches or (strict and len(matches) > 1):
        return NOT_FOUND
    return matches[0]

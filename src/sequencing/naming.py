"""Display names for timeline listings."""

from __future__ import annotations


def get_timeline_clip_name(content) -> str:
    """Derive a label for a sequence from the content it wraps.

    Lists are searched in order for the first nameable item. Plain values
    (strings, numbers) have no name.

    >>> def title_card(): ...
    >>> get_timeline_clip_name([None, title_card])
    'title_card'
    """
    if content is None or isinstance(content, (str, bytes, int, float)):
        return ""
    if isinstance(content, (list, tuple)):
        for item in content:
            name = get_timeline_clip_name(item)
            if name:
                return name
        return ""
    name = getattr(content, "display_name", None)
    if name:
        return name
    name = getattr(content, "__name__", None)
    if name:
        return name
    return type(content).__name__

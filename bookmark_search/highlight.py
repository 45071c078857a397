"""Highlight spans for a query within a text.

Matching follows the same strategy as scoring: a direct substring match is
preferred, and only when there is none do we fall back to fuzzy
subsequence matching, which may produce several spans. The result is plain
data (a list of ``Segment``); turning it into markup is left to
``render_segments`` or any other renderer.
"""
from typing import Iterable, List

from bookmark_search.models import Segment, Span
from bookmark_search.scorer import fold_case, query_chars


def _find_fuzzy_spans(text: str, chars: str) -> List[Span]:
    """Find successive, non-overlapping subsequence matches of chars.

    Args:
        text: Lower-cased text
        chars: Query characters to match in order

    Returns:
        Spans from the first to the last matched character of each match
    """
    spans: List[Span] = []
    text_index = 0

    while text_index < len(text):
        query_index = 0
        match_start = -1
        match_end = -1

        for i in range(text_index, len(text)):
            if query_index >= len(chars):
                break
            if text[i] == chars[query_index]:
                if match_start == -1:
                    match_start = i
                query_index += 1
                match_end = i + 1

        if match_start == -1 or query_index < len(chars):
            break

        spans.append(Span(match_start, match_end))
        text_index = match_end

    return spans


def find_spans(text: str, query: str) -> List[Span]:
    """Find the character ranges of text matched by query.

    Args:
        text: Original text
        query: Raw user query

    Returns:
        Ascending, non-overlapping spans into the original text
    """
    normalized = fold_case(query.strip())
    if not normalized:
        return []

    lowered = fold_case(text)

    position = lowered.find(normalized)
    if position != -1:
        return [Span(position, position + len(normalized))]

    chars = query_chars(normalized)
    if not chars:
        return []
    return _find_fuzzy_spans(lowered, chars)


def merge_spans(spans: Iterable[Span]) -> List[Span]:
    """Merge overlapping or touching spans.

    Args:
        spans: Spans in any order

    Returns:
        Sorted spans where each ends strictly before the next starts
    """
    ordered = sorted(spans, key=lambda span: span.start)
    if not ordered:
        return []

    merged = [ordered[0]]
    for current in ordered[1:]:
        last = merged[-1]
        if current.start <= last.end:
            merged[-1] = Span(last.start, max(last.end, current.end))
        else:
            merged.append(current)

    return merged


def highlight(text: str, query: str) -> List[Segment]:
    """Split text into highlighted and plain segments for a query.

    Concatenating the segment texts always gives back ``text``.

    Args:
        text: Original text
        query: Raw user query

    Returns:
        Segments in text order; a single plain segment when nothing matches
    """
    spans = merge_spans(find_spans(text, query))
    if not spans:
        return [Segment(text, False)]

    segments: List[Segment] = []
    last_index = 0

    for span in spans:
        if span.start > last_index:
            segments.append(Segment(text[last_index:span.start], False))
        segments.append(Segment(text[span.start:span.end], True))
        last_index = span.end

    if last_index < len(text):
        segments.append(Segment(text[last_index:], False))

    return segments


def render_segments(segments: Iterable[Segment], open_marker: str = "**", close_marker: str = "**") -> str:
    """Render segments as text, wrapping highlighted ones in markers."""
    parts = []
    for segment in segments:
        if segment.highlighted:
            parts.append(f"{open_marker}{segment.text}{close_marker}")
        else:
            parts.append(segment.text)
    return "".join(parts)

"""Single-text scoring: substring matching with a fuzzy subsequence fallback."""
from typing import Optional, Sequence

from bookmark_search.models import MatchResult, NO_MATCH


EXACT_SCORE = 1000
SUBSTRING_SCORE = 100
PREFIX_BONUS = 50
WORD_BOUNDARY_BONUS = 30
POSITION_BONUS = 20
FUZZY_SCORE = 10
CONSECUTIVE_BONUS = 5
DENSITY_BONUS = 20

WORD_BOUNDARIES = frozenset(" -_/")


def fold_case(text: str) -> str:
    """Lower-case text while keeping one character per input character.

    A few characters expand when lower-cased (e.g. "İ" becomes two code
    points). Those are reduced to their first character so that offsets into
    the folded string are valid offsets into the original. Every other
    character keeps its whole-string lowering (e.g. a final "Σ" becomes "ς").

    Args:
        text: Text to fold

    Returns:
        Lower-cased text of the same length
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered

    # Walk the original and the lowered text in step
    folded = []
    position = 0
    for ch in text:
        folded.append(lowered[position])
        position += len(ch.lower())
    return "".join(folded)


def query_chars(query: str) -> str:
    """Characters of a query used for fuzzy matching (spaces removed)."""
    return query.replace(" ", "")


def _substring_score(text: str, position: int) -> int:
    score = SUBSTRING_SCORE
    if position == 0:
        score += PREFIX_BONUS
    if position == 0 or text[position - 1] in WORD_BOUNDARIES:
        score += WORD_BOUNDARY_BONUS
    score += max(0, POSITION_BONUS - position)
    return score


def _fuzzy_score(text: str, chars: Sequence[str]) -> MatchResult:
    if not chars:
        return NO_MATCH

    query_index = 0
    consecutive = 0
    max_consecutive = 0
    last_match = -2

    for i, ch in enumerate(text):
        if query_index >= len(chars):
            break
        if ch == chars[query_index]:
            query_index += 1
            consecutive = consecutive + 1 if i == last_match + 1 else 1
            max_consecutive = max(max_consecutive, consecutive)
            last_match = i

    if query_index < len(chars):
        return NO_MATCH

    score = FUZZY_SCORE
    score += CONSECUTIVE_BONUS * max_consecutive
    score += DENSITY_BONUS * len(chars) // len(text)
    return MatchResult(matched=True, score=score)


def score_text(text: str, query: str, chars: Optional[str] = None) -> MatchResult:
    """Score a single text against a query.

    Rules are applied in order and the first applicable one wins: empty text,
    exact match, substring match, fuzzy subsequence match.

    Args:
        text: Text to score (may be empty)
        query: Trimmed, lower-cased query
        chars: Precomputed fuzzy characters of the query (spaces removed)

    Returns:
        MatchResult with the score for this text
    """
    if not text:
        return NO_MATCH

    query = fold_case(query)
    lowered = fold_case(text)

    if lowered == query:
        return MatchResult(matched=True, score=EXACT_SCORE)

    position = lowered.find(query)
    if position != -1:
        return MatchResult(matched=True, score=_substring_score(lowered, position))

    if chars is None:
        chars = query_chars(query)
    return _fuzzy_score(lowered, chars)

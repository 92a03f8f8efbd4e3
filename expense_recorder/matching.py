"""Fuzzy matching of spoken fragments against a reference list.

Each candidate is scored in ``[0, 1]`` as the larger of:

- phrase score: ``1`` when the normalized candidate occurs as a contiguous
  substring of the normalized fragment, else ``0``;
- token score: the share of the candidate's stemmed tokens present in the
  fragment's stemmed token set.

The highest score wins; on ties the earliest candidate is kept. The winner is
returned only when it reaches ``min_score``.
"""

from __future__ import annotations

from collections.abc import Iterable

from .normalizers import normalize_for_match, text_tokens

ACCOUNT_MIN_SCORE: float = 0.3
CATEGORY_MIN_SCORE: float = 0.25


def score_candidate(fragment_norm: str, fragment_tokens: set[str], candidate: str) -> float | None:
    """Return the candidate's score, or ``None`` when it has no tokens."""

    candidate_tokens = text_tokens(candidate)
    if not candidate_tokens:
        return None
    phrase_score = 1.0 if normalize_for_match(candidate) in fragment_norm else 0.0
    overlap = sum(1 for tok in candidate_tokens if tok in fragment_tokens)
    return max(phrase_score, overlap / len(candidate_tokens))


def best_match(
    fragment: str, candidates: Iterable[str], min_score: float = ACCOUNT_MIN_SCORE
) -> str:
    fragment_norm = normalize_for_match(fragment)
    if not fragment_norm:
        return ""
    fragment_tokens = set(text_tokens(fragment))

    best = ""
    best_score = 0.0
    for candidate in candidates:
        score = score_candidate(fragment_norm, fragment_tokens, candidate)
        # Strictly greater: ties keep the earlier candidate.
        if score is not None and score > best_score:
            best, best_score = candidate, score

    return best if best and best_score >= min_score else ""


__all__ = ["ACCOUNT_MIN_SCORE", "CATEGORY_MIN_SCORE", "best_match", "score_candidate"]

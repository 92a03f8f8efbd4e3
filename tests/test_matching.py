from expense_recorder.matching import (
    ACCOUNT_MIN_SCORE,
    CATEGORY_MIN_SCORE,
    best_match,
    score_candidate,
)
from expense_recorder.normalizers import normalize_for_match, text_tokens
from expense_recorder.reference_lists import DEFAULT_ACCOUNT_NAMES, DEFAULT_EXPENSE_CATEGORIES


def _score(fragment: str, candidate: str) -> float | None:
    return score_candidate(normalize_for_match(fragment), set(text_tokens(fragment)), candidate)


def test_thresholds():
    assert ACCOUNT_MIN_SCORE == 0.3
    assert CATEGORY_MIN_SCORE == 0.25


def test_phrase_containment_scores_one():
    assert _score("$50 to Wells Fargo 2%. Date is today.", "Wells Fargo 2%") == 1.0


def test_token_overlap_is_share_of_candidate_tokens():
    assert _score("chase sapphire reserve", "Chase freedom") == 0.5
    assert _score("blue card", "Amex blue cash preferred") == 0.25


def test_token_overlap_uses_stemmed_tokens_on_both_sides():
    assert _score("weekly groceries run", "Grocery") == 1.0
    assert _score("grocery run", "Groceries") == 1.0


def test_candidate_without_tokens_is_skipped():
    assert _score("misc stuff", "--") is None
    assert best_match("misc stuff", ["--", "Misc"], CATEGORY_MIN_SCORE) == "Misc"


def test_empty_fragment_yields_empty():
    assert best_match("", DEFAULT_ACCOUNT_NAMES) == ""
    assert best_match("  ... ", DEFAULT_ACCOUNT_NAMES) == ""


def test_empty_candidate_list_yields_empty():
    assert best_match("chase unlimited", []) == ""


def test_higher_score_replaces_earlier_partial_match():
    # "Chase checking" scores 0.5 first; the exact phrase later wins with 1.0.
    assert best_match("$30 to chase unlimited", DEFAULT_ACCOUNT_NAMES) == "Chase unlimited"


def test_ties_keep_first_candidate():
    assert best_match("chase", ["Chase checking", "Chase Sapphire"]) == "Chase checking"
    assert best_match("chase", ["Chase Sapphire", "Chase checking"]) == "Chase Sapphire"


def test_min_score_boundary():
    # One of four tokens: 0.25 passes the category threshold but not the account one.
    assert best_match("blue card", ["Amex blue cash preferred"], ACCOUNT_MIN_SCORE) == ""
    assert best_match("blue card", ["Amex blue cash preferred"], CATEGORY_MIN_SCORE) == (
        "Amex blue cash preferred"
    )


def test_matched_entry_is_returned_verbatim():
    assert best_match("usbank cashplus yf", DEFAULT_ACCOUNT_NAMES) == "USBank Cashplus - YF"
    assert best_match("rent mortgage", DEFAULT_EXPENSE_CATEGORIES, CATEGORY_MIN_SCORE) == (
        "Rent/Mortgage"
    )


def test_short_words_ending_in_s_still_match():
    # "gas" is not stemmed, so it meets an entry spelled the same way.
    assert best_match("gas", ["Gas station", "Misc"], CATEGORY_MIN_SCORE) == "Gas station"

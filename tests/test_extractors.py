# ruff: noqa: E501
"""Card-name, category and description extraction against the default lists.

All transcripts follow the spoken pattern:
"Charge $xx.yy to <account>. Date is <date>. Category is <category>.
Description is <free text that may mention an account or category>"
"""

import pytest

from expense_recorder.extractors import (
    extract_card_name,
    extract_description,
    extract_expense_category,
)
from expense_recorder.reference_lists import DEFAULT_ACCOUNT_NAMES, DEFAULT_EXPENSE_CATEGORIES

STANDARD = (
    "Charge $30.50 to Chase Unlimited. Date is December 3rd. "
    "Category is Gift purchase. Description is parents visiting groceries"
)
MENTIONS_ACCOUNT = (
    "Charge $50 to Wells Fargo 2%. Date is December 5th. Category is Dining out. "
    "Description is dinner at Chase restaurant"
)
MENTIONS_CATEGORY = (
    "Charge $100 to Discover it. Date is today. Category is Gift purchase. "
    "Description is Grocery store gift card"
)


# ---- Card names ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("transcript", "expected"),
    [
        (STANDARD, "Chase unlimited"),
        (
            "Charge $4,000.50 to CITI COSTCO. Date is November 30th. Category is Grocery. "
            "Description is regular weekend shopping",
            "CITI COSTCO",
        ),
        (MENTIONS_ACCOUNT, "Wells Fargo 2%"),
        (
            "Charge $200 to USBank Cashplus - YF. Date is today. Category is Utilities. "
            "Description is electricity bill",
            "USBank Cashplus - YF",
        ),
        (MENTIONS_CATEGORY, "Discover it"),
        (
            "Charge $75 to Amazon Visa. Date is December 1st. Category is Household essentials. "
            "Description is online purchase",
            "Amazon Visa",
        ),
        ("Charge $30 to chase unlimited. Date is today. Category is Misc. Description is test", "Chase unlimited"),
        ("Charge $12 to Wayfair", "Wayfair"),
    ],
)
def test_card_name_matches_account_list(transcript: str, expected: str):
    assert extract_card_name(transcript, DEFAULT_ACCOUNT_NAMES) == expected


def test_card_name_unknown_account_is_discarded():
    t = "Charge $50 to Unknown Card. Date is today. Category is Misc. Description is test"
    assert extract_card_name(t, DEFAULT_ACCOUNT_NAMES) == ""


def test_card_name_searches_whole_transcript_without_charge():
    t = "Paid $20 with IKEA card. Category is Home improvement"
    assert extract_card_name(t, DEFAULT_ACCOUNT_NAMES) == "IKEA"


def test_card_name_searches_whole_transcript_when_window_empty():
    t = "Charge: Category is Misc. Description is Chase Sapphire dinner"
    assert extract_card_name(t, DEFAULT_ACCOUNT_NAMES) == "Chase Sapphire"


def test_card_name_with_empty_list():
    assert extract_card_name(STANDARD, []) == ""
    assert extract_card_name("", DEFAULT_ACCOUNT_NAMES) == ""


# ---- Categories ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("transcript", "expected"),
    [
        (STANDARD, "Gift purchase"),
        (MENTIONS_CATEGORY, "Gift purchase"),
        (MENTIONS_ACCOUNT, "Dining out"),
        (
            "Charge $75 to Amazon Visa. Date is December 1st. Category Grocery. "
            "Description is weekly shopping",
            "Grocery",
        ),
        (
            "Charge $200 to USBank Cashplus. Date is today. Category is Utilities. "
            "Description is electricity bill",
            "Utilities",
        ),
        (
            "Charge $150 to Chase Sapphire. Date is today. Category is Subscription or membership. "
            "Description is Netflix subscription",
            "Subscription or membership",
        ),
        (
            "Charge $1,200 to BOA checking. Date is December 1st. Category is Rent/Mortgage. "
            "Description is monthly rent",
            "Rent/Mortgage",
        ),
        ("Charge $30 to Chase Unlimited. Date is today. Category is gift purchase. Description is test", "Gift purchase"),
        ("Charge $5 to IKEA. Category is groceries", "Grocery"),
    ],
)
def test_category_matches_category_list(transcript: str, expected: str):
    assert extract_expense_category(transcript, DEFAULT_EXPENSE_CATEGORIES) == expected


def test_category_unknown_text_passes_through():
    t = "Charge $50 to Chase Unlimited. Date is today. Category is New Category. Description is test"
    assert extract_expense_category(t, DEFAULT_EXPENSE_CATEGORIES) == "New Category"


def test_category_unknown_text_passes_through_without_description():
    t = "Charge $20 to IKEA. Category is Pet supplies."
    assert extract_expense_category(t, DEFAULT_EXPENSE_CATEGORIES) == "Pet supplies"


def test_category_without_keyword_matches_whole_transcript():
    t = "Charge $20 to IKEA for home improvement stuff"
    assert extract_expense_category(t, DEFAULT_EXPENSE_CATEGORIES) == "Home improvement"


def test_category_without_keyword_never_passes_raw_text():
    assert extract_expense_category("Charge $20 to IKEA", DEFAULT_EXPENSE_CATEGORIES) == ""


def test_category_with_empty_list_passes_window_through():
    assert extract_expense_category(STANDARD, []) == "Gift purchase"


def test_category_shared_word_reaches_threshold():
    # "or" is one of three tokens of "Gaming or Entertainment" (0.33 >= 0.25).
    t = "Charge $9 to IKEA. Category is Food or drinks. Description is snacks"
    assert extract_expense_category(t, DEFAULT_EXPENSE_CATEGORIES) == "Gaming or Entertainment"


def test_card_and_category_treat_unknown_text_differently():
    t = "Charge $9 to Zeta Card. Category is Zeta Card. Description is x"
    assert extract_card_name(t, DEFAULT_ACCOUNT_NAMES) == ""
    assert extract_expense_category(t, DEFAULT_EXPENSE_CATEGORIES) == "Zeta Card"


# ---- Descriptions ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("transcript", "expected"),
    [
        (STANDARD, "parents visiting groceries"),
        (MENTIONS_ACCOUNT, "dinner at Chase restaurant"),
        (MENTIONS_CATEGORY, "Grocery store gift card"),
        (
            "Charge $75 to Amazon Visa. Date is December 1st. Category is Grocery. "
            "Description weekly shopping",
            "weekly shopping",
        ),
        (
            "Charge $150 to Chase Sapphire. Date is today. Category is Subscription or membership. "
            "Description is Netflix subscription. Monthly fee",
            "Netflix subscription. Monthly fee",
        ),
        ("Charge $25 to Capital One. Category is Misc. Description is coffee & donuts", "coffee & donuts"),
        ("Charge $50 to BOA checking. Category is Misc. Description is item #12345", "item #12345"),
        ("Description: monthly subscription fee", "monthly subscription fee"),
    ],
)
def test_description_extraction(transcript: str, expected: str):
    assert extract_description(transcript) == expected


def test_description_absent_keyword():
    assert extract_description("Charge $30 to Chase Unlimited. Date is today. Category is Misc") == ""
    assert extract_description("") == ""


def test_fields_after_case_changing_characters():
    t = "İİ Charge $5 to IKEA. Category is:Grocery. Description is:dinner"
    assert extract_card_name(t, DEFAULT_ACCOUNT_NAMES) == "IKEA"
    assert extract_expense_category(t, DEFAULT_EXPENSE_CATEGORIES) == "Grocery"
    assert extract_description(t) == "dinner"

"""Tests for receipt point rules."""

from datetime import datetime

import pytest

from conftest import load_receipt
from receipt_api.model import Receipt, ReceiptItem
from receipt_api.services.parsing import receipt_from_payload
from receipt_api.services.scoring import calculate_points, explain_points, score_receipt


def _receipt(retailer="", total=1, items=(), when=datetime(2022, 1, 2, 10, 0), points=None):
    """Receipt scoring zero on every rule unless overridden."""
    return Receipt(retailer=retailer, purchased_at=when, items=list(items), total=total, points=points)


def _rule(receipt, name):
    return dict(explain_points(receipt))[name]


@pytest.mark.parametrize("name,points", [
    ("readme-target-receipt.json", 28),
    ("readme-corner-market-receipt.json", 109),
    ("morning-receipt.json", 15),
    ("simple-receipt.json", 31),
])
def test_example_receipts(name, points):
    assert calculate_points(receipt_from_payload(load_receipt(name))) == points


def test_baseline_receipt_scores_zero():
    assert calculate_points(_receipt()) == 0


def test_retailer_counts_letters_and_digits_only():
    assert _rule(_receipt(retailer="M&M Corner Market"), "retailer_chars") == 14
    assert _rule(_receipt(retailer="7-Eleven 24/7"), "retailer_chars") == 10
    assert _rule(_receipt(retailer="Café Zürich"), "retailer_chars") == 10
    assert _rule(_receipt(retailer=" - & "), "retailer_chars") == 0


@pytest.mark.parametrize("total", [0, 100, 900, 123400])
def test_round_dollar_total_also_gets_quarter_bonus(total):
    assert calculate_points(_receipt(total=total)) == 75


@pytest.mark.parametrize("total,points", [(25, 25), (50, 25), (175, 25), (101, 0), (3535, 0)])
def test_quarter_total(total, points):
    assert calculate_points(_receipt(total=total)) == points


@pytest.mark.parametrize("n", range(0, 8))
def test_item_pairs(n):
    # 4-character descriptions keep the description rule out of it
    items = [ReceiptItem("abcd", 100) for _ in range(n)]
    assert calculate_points(_receipt(items=items)) == 5 * (n // 2)


@pytest.mark.parametrize("price,points", [(0, 0), (1, 1), (500, 1), (501, 2), (1000, 2), (1225, 3)])
def test_description_rule_rounds_up(price, points):
    assert _rule(_receipt(items=[ReceiptItem("abc", price)]), "item_descriptions") == points


def test_description_length_is_trimmed():
    items = [ReceiptItem("   Klarbrunn 12-PK 12 FL OZ  ", 1200)]
    assert _rule(_receipt(items=items), "item_descriptions") == 3


@pytest.mark.parametrize("description,points", [("Éa", 1), ("ab", 0), ("Café", 0), ("Cafés!", 0), ("日", 1)])
def test_description_length_counts_utf8_bytes(description, points):
    assert _rule(_receipt(items=[ReceiptItem(description, 500)]), "item_descriptions") == points


def test_description_not_multiple_of_three_earns_nothing():
    assert _rule(_receipt(items=[ReceiptItem("abcd", 1200)]), "item_descriptions") == 0


@pytest.mark.parametrize("description", ["", "   ", "\t\n"])
def test_empty_description_counts_as_multiple_of_three(description):
    assert _rule(_receipt(items=[ReceiptItem(description, 250)]), "item_descriptions") == 1


@pytest.mark.parametrize("day,points", [(1, 6), (2, 0), (31, 6), (20, 0)])
def test_odd_day(day, points):
    assert calculate_points(_receipt(when=datetime(2022, 1, day, 10, 0))) == points


@pytest.mark.parametrize("hour,minute,points", [
    (13, 59, 0),
    (14, 0, 10),
    (15, 59, 10),
    (16, 0, 0),
])
def test_afternoon_window(hour, minute, points):
    assert calculate_points(_receipt(when=datetime(2022, 1, 2, hour, minute))) == points


def test_breakdown_sums_to_total():
    receipt = receipt_from_payload(load_receipt("readme-corner-market-receipt.json"))
    assert sum(p for _, p in explain_points(receipt)) == calculate_points(receipt) == 109


def test_assigned_points_are_never_recalculated():
    receipt = _receipt(total=100, points=7)
    assert calculate_points(receipt) == 7
    assert calculate_points(receipt) == 7
    assert score_receipt(receipt).points == 7


def test_zero_points_is_a_final_score():
    receipt = score_receipt(_receipt())
    assert receipt.points == 0

    receipt.total = 100
    assert calculate_points(receipt) == 0


def test_calculate_points_does_not_assign():
    receipt = _receipt(total=100)
    assert calculate_points(receipt) == 75
    assert receipt.points is None
    assert score_receipt(receipt).points == 75


def test_calculate_points_is_deterministic():
    payload = load_receipt("readme-target-receipt.json")
    assert {calculate_points(receipt_from_payload(payload)) for _ in range(5)} == {28}

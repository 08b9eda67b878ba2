"""
Tests for entry expense recalculation.
"""
from datetime import date
from hikingbuddy.models.hike_entry import HikeEntry, ExpenseCategory
from hikingbuddy.schemas.hike_entry import ExpenseItem
from hikingbuddy.services.entry_service import calculate_money_spent, replace_expenses


def test_calculate_money_spent():
    expenses = [{"category": "Food", "amount": 12.5}, {"category": "Travel", "amount": 7.5}]
    assert calculate_money_spent(expenses) == 20


def test_calculate_money_spent_empty_and_missing_amounts():
    assert calculate_money_spent([]) == 0
    assert calculate_money_spent(None) == 0
    assert calculate_money_spent([{"category": "Food"}, {"category": "General", "amount": 3}]) == 3


def test_replace_expenses_discards_previous_total():
    entry = HikeEntry(
        date=date(2024, 6, 1),
        expenses=[{"category": "Food", "amount": 100}],
        money_spent=100
    )
    
    replace_expenses(entry, [
        ExpenseItem(category=ExpenseCategory.TRAVEL, amount=15),
        ExpenseItem(category=ExpenseCategory.PRE_HIKE, amount=5),
    ])
    
    assert entry.money_spent == 20
    assert entry.expenses == [
        {"category": "Travel", "amount": 15},
        {"category": "Pre-Hike", "amount": 5},
    ]


def test_replace_expenses_with_empty_list_zeroes_total():
    entry = HikeEntry(date=date(2024, 6, 1), expenses=[{"category": "Food", "amount": 9}], money_spent=9)
    
    replace_expenses(entry, [])
    
    assert entry.money_spent == 0
    assert entry.expenses == []

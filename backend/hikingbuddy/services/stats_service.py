"""
Statistics aggregation over a hike and its daily entries.

Everything here is pure arithmetic on already-fetched data: no session,
no I/O, and the inputs are never mutated.
"""
from typing import Any, Dict, List, NamedTuple, Sequence, Union
from hikingbuddy.models.hike import Hike
from hikingbuddy.models.hike_entry import HikeEntry, ExpenseCategory
from hikingbuddy.schemas.stats import HikeStats


class HikeSummary(NamedTuple):
    """Hike, its entries in date order, and the aggregated stats."""
    hike: Hike
    entries: List[HikeEntry]
    stats: HikeStats


def _expense_field(expense: Any, name: str) -> Any:
    if isinstance(expense, dict):
        return expense.get(name)
    return getattr(expense, name, None)


def empty_category_totals() -> Dict[str, float]:
    """One zeroed slot per expense category, in declaration order."""
    return {category.value: 0 for category in ExpenseCategory}


def tally_categories(entries: Sequence[HikeEntry]) -> Dict[str, float]:
    """
    Sum expense amounts per category across all entries.
    
    Expenses whose category is missing or not one of the fixed categories
    are left out of every slot. They still count towards the entries'
    money_spent, so the slots can then sum to less than the money spent.
    """
    totals = empty_category_totals()
    for entry in entries:
        for expense in entry.expenses or []:
            category = _expense_field(expense, "category")
            if isinstance(category, ExpenseCategory):
                category = category.value
            if category in totals:
                totals[category] += _expense_field(expense, "amount") or 0
    return totals


def percentage(part: float, whole: float) -> Union[str, int]:
    """part/whole as a one-decimal string, or 0 when whole is not positive. Not capped at 100."""
    if whole > 0:
        return f"{part / whole * 100:.1f}"
    return 0


def compute_stats(hike: Hike, entries: Sequence[HikeEntry]) -> HikeStats:
    """Aggregate distance and spending for a hike."""
    total_km_travelled = sum(entry.km_travelled or 0 for entry in entries)
    total_money_spent = sum(entry.money_spent or 0 for entry in entries)
    # Denominator for a per-hiking-day average; callers divide
    entries_with_distance = sum(1 for entry in entries if (entry.km_travelled or 0) > 0)
    
    category_totals = tally_categories(entries)
    
    # Anything not tagged Pre-Hike is on-trail spending
    pre_hike_spent = category_totals[ExpenseCategory.PRE_HIKE.value]
    on_trail_spent = total_money_spent - pre_hike_spent
    
    total_distance = hike.total_distance or 0
    pre_hike_budget = hike.pre_hike_budget or 0
    on_trail_budget = hike.effective_on_trail_budget
    
    if entries:
        distance_pct = percentage(total_km_travelled, total_distance)
        pre_hike_pct = percentage(pre_hike_spent, pre_hike_budget)
        on_trail_pct = percentage(on_trail_spent, on_trail_budget)
    else:
        # Nothing logged yet reads as a plain 0 rather than "0.0"
        distance_pct = pre_hike_pct = on_trail_pct = 0
    
    return HikeStats(
        total_km_travelled=total_km_travelled,
        total_money_spent=total_money_spent,
        pre_hike_spent=pre_hike_spent,
        on_trail_spent=on_trail_spent,
        category_totals=category_totals,
        distance_remaining=max(0, total_distance - total_km_travelled),
        pre_hike_budget_remaining=max(0, pre_hike_budget - pre_hike_spent),
        on_trail_budget_remaining=max(0, on_trail_budget - on_trail_spent),
        distance_percentage=distance_pct,
        pre_hike_budget_percentage=pre_hike_pct,
        on_trail_budget_percentage=on_trail_pct,
        total_entries=len(entries),
        entries_with_distance=entries_with_distance
    )


def summarize_hike(hike: Hike, entries: Sequence[HikeEntry]) -> HikeSummary:
    """Build the full statistics summary for a hike."""
    ordered = sorted(entries, key=lambda entry: entry.date)
    return HikeSummary(hike=hike, entries=ordered, stats=compute_stats(hike, ordered))

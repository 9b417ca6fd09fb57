"""
Item assignment strategies for Grocery Split
Decide who an item belongs to before balances are computed
"""

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from data_models import Assignment, ParsedItem
from constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from config import REBALANCE_THRESHOLD


def assign_round_robin(items: Sequence[ParsedItem], people: Sequence[str]) -> List[Assignment]:
    """Hand items out to people in turn"""
    if not people:
        return []
    return [(item, people[i % len(people)]) for i, item in enumerate(items)]


def assign_weighted(items: Sequence[ParsedItem], people: Sequence[str],
                    weights: Mapping[str, float]) -> List[Assignment]:
    """Give each person a block of items proportional to their weight"""
    if not people:
        return []

    total_weight = sum(weights.get(person, 1.0) for person in people)
    if not math.isfinite(total_weight) or total_weight <= 0:
        return assign_round_robin(items, people)

    pool = []
    for person in people:
        count = int((weights.get(person, 1.0) / total_weight) * len(items))
        pool.extend([person] * max(1, count))

    assignments = []
    for i, item in enumerate(items):
        if i < len(pool):
            assignments.append((item, pool[i]))
        else:
            assignments.append((item, people[i % len(people)]))
    return assignments


def categorize_item(name: str) -> str:
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def _best_person(category: str, people: Sequence[str],
                 preferences: Mapping[Tuple[str, str], float],
                 weights: Mapping[str, float]) -> str:
    best = people[0]
    highest = 0.0
    for person in people:
        score = preferences.get((person, category), 1.0) * weights.get(person, 1.0)
        if score > highest:
            highest = score
            best = person
    return best


def _rebalance(assignments: List[Assignment], people: Sequence[str]) -> List[Assignment]:
    """Move expensive items off people well above the average"""
    totals: Dict[str, float] = {person: 0.0 for person in people}
    for item, person in assignments:
        totals[person] += item.total_price

    average = sum(totals.values()) / len(people)
    owners = [person for _, person in assignments]

    order = sorted(range(len(assignments)), key=lambda i: assignments[i][0].total_price, reverse=True)
    for i in order:
        item = assignments[i][0]
        current = owners[i]
        if totals[current] > average * REBALANCE_THRESHOLD:
            lowest = min(people, key=lambda p: totals[p])
            totals[current] -= item.total_price
            totals[lowest] += item.total_price
            owners[i] = lowest

    return [(item, owner) for (item, _), owner in zip(assignments, owners)]


def assign_by_preference(items: Sequence[ParsedItem], people: Sequence[str],
                         preferences: Optional[Mapping[Tuple[str, str], float]] = None,
                         weights: Optional[Mapping[str, float]] = None) -> List[Assignment]:
    """Give each item to whoever prefers its category most, then even things out

    preferences maps (person, category) to a weight, 1.0 when missing.
    """
    if not people:
        return []

    preferences = preferences or {}
    weights = weights or {}
    assignments = [
        (item, _best_person(categorize_item(item.name), people, preferences, weights))
        for item in items
    ]
    return _rebalance(assignments, people)

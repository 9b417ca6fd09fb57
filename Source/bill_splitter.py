"""
Bill Splitter module for Grocery Split
Handles equal splits, per-person balances and settlement planning
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from data_models import Assignment, ParsedItem, Person, Transfer
from config import SETTLEMENT_EPSILON
from log_setup import get_logger

log = get_logger(__name__)


def _valid_names(names: Iterable[str]) -> List[str]:
    """Trimmed names, blank and whitespace-only ones dropped"""
    return [name.strip() for name in names if name and name.strip()]


def equal_split(total: float, names: Sequence[str]) -> List[Person]:
    """Split a total evenly between the valid names, in input order

    Plain float division: the shares may differ from the total by a
    floating point epsilon.
    """
    valid = _valid_names(names)
    if not valid or total <= 0:
        return []

    share = total / len(valid)
    return [Person(name=name, amount_owed=share) for name in valid]


def percentage_split(total: float, shares: Sequence[Tuple[str, float]]) -> List[Person]:
    """Split a total by percentage; names without a valid name are dropped"""
    valid = [(name.strip(), pct) for name, pct in shares if name and name.strip()]
    if not valid or total <= 0 or sum(pct for _, pct in valid) <= 0:
        return []

    return [Person(name=name, amount_owed=total * (max(pct, 0.0) / 100.0)) for name, pct in valid]


def calculate_total_owed(people: Iterable[Person]) -> float:
    return sum(person.amount_owed for person in people)


def aggregate_balances(assignments: Iterable[Assignment]) -> Dict[str, float]:
    """Sum price x quantity per assigned person; unassigned items are ignored"""
    balances: Dict[str, float] = {}
    for item, person in assignments:
        if person is None:
            continue
        balances[person] = balances.get(person, 0.0) + item.total_price
    return balances


def _participants(balances: Mapping[str, float], people: Optional[Iterable[str]]) -> List[str]:
    """Everyone to settle between, in a stable order by name"""
    names = list(people) if people is not None else []
    names.extend(balances.keys())
    return sorted(dict.fromkeys(names))


def plan_settlement(balances: Mapping[str, float],
                    people: Optional[Iterable[str]] = None) -> List[Transfer]:
    """Transfers that bring everyone to the average amount

    A debtor here is someone above the average (owed money back), a creditor
    someone below it; every transfer goes from a creditor to a debtor.
    """
    participants = _participants(balances, people)
    if not participants:
        return []

    total = sum(balances.values())
    average = total / len(participants)
    log.debug(f"Settling {total:.2f} between {len(participants)} people, average {average:.2f}")

    debtors = []
    creditors = []
    for person in participants:
        deviation = balances.get(person, 0.0) - average
        if deviation > SETTLEMENT_EPSILON:
            debtors.append([person, deviation])
        elif deviation < -SETTLEMENT_EPSILON:
            creditors.append([person, -deviation])

    transfers = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        amount = min(debtors[i][1], creditors[j][1])
        transfers.append(Transfer(from_person=creditors[j][0], to_person=debtors[i][0], amount=amount))

        debtors[i][1] -= amount
        creditors[j][1] -= amount

        if debtors[i][1] <= SETTLEMENT_EPSILON:
            i += 1
        if creditors[j][1] <= SETTLEMENT_EPSILON:
            j += 1

    return transfers


def settle_assignments(assignments: Iterable[Assignment],
                       people: Optional[Iterable[str]] = None) -> List[Transfer]:
    """Aggregate assigned items and plan the settlement in one go

    Without people, only those holding at least one item take part.
    """
    balances = aggregate_balances(assignments)
    if people is None and not balances:
        return []
    return plan_settlement(balances, people)


class BillSplitter:
    """Holds item assignments for a group and computes their settlement"""

    def __init__(self, items: Sequence[ParsedItem], people: Sequence[str]):
        self.items = list(items)
        self.people = _valid_names(people)
        self.assigned_to: List[Optional[str]] = [None] * len(self.items)
        self.balances: Dict[str, float] = {}
        self.transfers: List[Transfer] = []

    @property
    def total(self) -> float:
        return sum(item.total_price for item in self.items)

    def assign(self, index: int, person: Optional[str]):
        """Assign one item to a person, or clear it with None"""
        if person is not None and person not in self.people:
            raise ValueError(f"Unknown person: {person}")
        self.assigned_to[index] = person

    def apply(self, assignments: Sequence[Assignment]):
        """Take over assignments produced by an assignment strategy, matched by position"""
        for index, (_, person) in enumerate(assignments[:len(self.items)]):
            self.assign(index, person)

    def assignments(self) -> List[Assignment]:
        return list(zip(self.items, self.assigned_to))

    def unassigned(self) -> List[ParsedItem]:
        return [item for item, person in self.assignments() if person is None]

    def equal_split(self) -> List[Person]:
        return equal_split(self.total, self.people)

    def calculate_balances(self) -> Dict[str, float]:
        """Amount attributed to every person, zero for those without items"""
        balances = {person: 0.0 for person in self.people}
        balances.update(aggregate_balances(self.assignments()))
        self.balances = balances
        return balances

    def optimize_settlements(self) -> List[Transfer]:
        if not self.people:
            self.transfers = []
            return self.transfers

        self.transfers = plan_settlement(self.calculate_balances(), self.people)
        return self.transfers

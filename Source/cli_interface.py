"""
CLI Interface module for Grocery Split
Prints scan results, splits and settlements to the terminal
"""

import math
from typing import Dict, List, Optional, Sequence

from assignment import assign_by_preference, assign_round_robin, assign_weighted
from bill_splitter import BillSplitter, percentage_split
from data_models import Person, ScanResult, Transfer
from exporter import export_results
from utils import clean_text_for_display, format_currency, try_parse_float

ASSIGN_METHODS = ['none', 'round-robin', 'weighted', 'smart']


def _parse_pairs(values: Optional[Sequence[str]], what: str) -> Dict[str, float]:
    """NAME=NUMBER pairs; malformed, negative or non-finite entries are reported and skipped"""
    pairs = {}
    for value in values or []:
        name, _, raw = value.partition('=')
        number = try_parse_float(raw)
        if not name.strip() or number is None or not math.isfinite(number) or number < 0:
            print(f"⚠ Ignoring {what} {value!r}, expected NAME=NUMBER")
            continue
        pairs[name.strip()] = number
    return pairs


def parse_weights(values: Optional[Sequence[str]]) -> Dict[str, float]:
    """'Alice=2 Bob=1' style weights"""
    return _parse_pairs(values, 'weight')


def parse_percentages(values: Optional[Sequence[str]]) -> Dict[str, float]:
    """'Alice=60 Bob=40' style percentages"""
    return _parse_pairs(values, 'percentage')


class SplitCLI:
    """Command-line front end for Grocery Split"""

    def __init__(self, currency: str):
        self.currency = currency
        self.scan: Optional[ScanResult] = None
        self.splitter: Optional[BillSplitter] = None
        self.shares: List[Person] = []
        self.transfers: List[Transfer] = []

    def money(self, amount: float) -> str:
        return format_currency(amount, self.currency)

    def display_items(self):
        """Display parsed receipt items"""
        print("\n" + "="*50)
        print(f"📋 RECEIPT ITEMS ({self.scan.source_kind.display_name}: {self.scan.source_id})")
        print("="*50)

        for i, item in enumerate(self.scan.items, 1):
            name = clean_text_for_display(item.name, 30)
            print(f"{i:2}. {name:30} {item.quantity:2}x {self.money(item.total_price):>10}")

        print("-"*50)
        print(f"{'TOTAL:':40} {self.money(self.scan.total):>10}")

    def split_equally(self):
        self.shares = self.splitter.equal_split()
        self.display_shares("➗ EQUAL SPLIT")

    def split_by_percentage(self, percentages: Dict[str, float]):
        self.shares = percentage_split(self.splitter.total, list(percentages.items()))
        self.display_shares("📊 PERCENTAGE SPLIT")

        assigned = sum(percentages.values())
        if self.shares and abs(assigned - 100.0) > 0.01:
            print(f"⚠ Percentages add up to {assigned:.2f}%, not 100%")

    def display_shares(self, title: str):
        print("\n" + "="*50)
        print(title)
        print("="*50)
        if not self.shares:
            print("Nothing to split")
            return
        for person in self.shares:
            print(f"{person.name:15} : {self.money(person.amount_owed):>10}")

    def assign_items(self, method: str, weights: Dict[str, float]):
        """Assign items to people with one of the assignment strategies"""
        people = self.splitter.people
        items = self.splitter.items

        if method == 'round-robin':
            assignments = assign_round_robin(items, people)
        elif method == 'weighted':
            assignments = assign_weighted(items, people, weights)
        elif method == 'smart':
            assignments = assign_by_preference(items, people, weights=weights)
        else:
            return

        self.splitter.apply(assignments)

        print("\n" + "="*50)
        print("🔍 ITEM ASSIGNMENT")
        print("="*50)
        for item, person in self.splitter.assignments():
            print(f"{clean_text_for_display(item.name, 30):30} -> {person or 'Unassigned'}")

    def calculate_settlements(self):
        """Calculate and display settlements"""
        self.transfers = self.splitter.optimize_settlements()

        print("\n" + "="*50)
        print("💸 SETTLEMENTS")
        print("="*50)

        if not self.transfers:
            print("\n🎉 Everyone is even - no settlements needed!")
        else:
            for t in self.transfers:
                print(f"{t.from_person:15} → {t.to_person:15} : {self.money(t.amount):>10}")

        print("\n" + "-"*50)
        print("💰 INDIVIDUAL SHARES")
        print("-"*50)
        for person, amount in self.splitter.balances.items():
            print(f"{person:15} : {self.money(amount):>10}")
        print(f"\nTransactions:     {len(self.transfers)}")

    def export(self, path: str):
        try:
            export_results(path, self.scan, self.shares, self.transfers)
        except OSError as e:
            print(f"\nExport failed: {e}")
            return False
        print(f"\n✅ Split exported to {path}")
        return True

    def run(self, scan: ScanResult, people: Sequence[str], method: str = 'none',
            weights: Optional[Dict[str, float]] = None, quick: bool = False,
            export_path: Optional[str] = None,
            percentages: Optional[Dict[str, float]] = None) -> bool:
        """Show a scan, split it between people and optionally export the result

        With percentages the shares follow them instead of an equal split.
        """
        self.scan = scan
        people = list(people) or list(percentages or {})
        self.splitter = BillSplitter(scan.items, people)
        self.display_items()

        if quick or not self.splitter.people:
            return True

        if percentages:
            self.split_by_percentage(percentages)
        else:
            self.split_equally()
        if method != 'none':
            self.assign_items(method, weights or {})
            self.calculate_settlements()

        if export_path:
            return self.export(export_path)
        return True

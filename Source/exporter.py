"""
Export module for Grocery Split
Writes a scan and its split to JSON
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from data_models import Person, ScanResult, Transfer, people_to_dicts

EXPORT_VERSION = '1.0'


def build_export(scan: ScanResult, shares: Sequence[Person],
                 transfers: Sequence[Transfer],
                 timestamp: Optional[datetime] = None) -> Dict[str, Any]:
    """Everything about one split, with the field names used on the wire"""
    timestamp = timestamp or datetime.now()
    payment_instructions = [
        {
            'instruction': f"{t.from_person} pays {t.to_person} {t.amount:.2f}",
            **t.to_dict(),
        }
        for t in transfers
    ]

    return {
        'exportInfo': {
            'timestamp': timestamp.isoformat(),
            'version': EXPORT_VERSION,
        },
        'scan': scan.to_dict(),
        'people': people_to_dicts(list(shares)),
        'settlement': {
            'transfers': [t.to_dict() for t in transfers],
            'transactionsNeeded': len(transfers),
            'paymentInstructions': payment_instructions,
        },
    }


def default_export_filename(timestamp: Optional[datetime] = None) -> str:
    timestamp = timestamp or datetime.now()
    return f"grocery_split_{timestamp.strftime('%Y%m%d_%H%M%S')}.json"


def export_results(path: str, scan: ScanResult, shares: Sequence[Person],
                   transfers: Sequence[Transfer]) -> Dict[str, Any]:
    data = build_export(scan, shares, transfers)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return data


def load_export(path: str) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def transfers_from_export(data: Dict[str, Any]) -> List[Transfer]:
    return [
        Transfer(from_person=t['from'], to_person=t['to'], amount=float(t['amount']))
        for t in data.get('settlement', {}).get('transfers', [])
    ]

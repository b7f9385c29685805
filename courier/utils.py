# courier/utils.py
"""Utility functions"""
import os
from datetime import datetime
from typing import List, Dict, Iterable


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    if path:
        os.makedirs(path, exist_ok=True)


def categorize_validation_issues(issues: List[str]) -> Dict[str, int]:
    """Categorize and count validation issues"""
    categories = {
        'zone_mismatches': 0,
        'urgency_mismatches': 0,
        'membership_errors': 0,
        'ordering_errors': 0,
        'duplicates': 0,
        'other': 0
    }

    for issue in issues:
        if 'ZONE' in issue:
            categories['zone_mismatches'] += 1
        elif 'URGENCY' in issue:
            categories['urgency_mismatches'] += 1
        elif 'MEMBERSHIP' in issue:
            categories['membership_errors'] += 1
        elif 'ORDER' in issue:
            categories['ordering_errors'] += 1
        elif 'DUPLICATE' in issue:
            categories['duplicates'] += 1
        else:
            categories['other'] += 1

    return categories


def format_timestamp(dt: datetime = None) -> str:
    """Format timestamp for filenames"""
    if dt is None:
        dt = datetime.now()
    return dt.strftime('%Y%m%d_%H%M%S')


def fold_case(text: str) -> str:
    """Case-fold one character at a time: upper-case, then lower-case, never expanding"""
    folded = []
    for char in text:
        upper = char.upper()
        if len(upper) != 1:
            upper = char
        folded.append(upper.lower()[0])
    return ''.join(folded)


def sum_divisible(values: Iterable[int], divisor: int = None) -> int:
    """Sum the values that are exact multiples of divisor"""
    from courier.config import URGENCY_DIVISOR
    divisor = URGENCY_DIVISOR if divisor is None else divisor
    return sum(value for value in values if value % divisor == 0)


def distinct_vowels(text: str) -> int:
    """Count distinct vowels in text, ignoring case"""
    from courier.config import VOWELS
    return len({char for char in text.lower() if char in VOWELS})

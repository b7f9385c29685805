"""OrderValidator recomputation checks"""
from collections import deque

from courier.models import Order
from courier.processing import OrderProcessor, OrderValidator
from courier.utils import categorize_validation_issues


class BrokenUrgencyOrder(Order):
    """Order whose urgency formula forgets the vowel factor"""

    @property
    def urgency(self):
        return sum(p for p in self.priorities if p % 3 == 0)


def test_derived_fields_clean(mixed_orders):
    assert OrderValidator(mixed_orders).validate_derived_fields() == []


def test_detects_wrong_zone(ana):
    issues = OrderValidator([ana]).validate_zone(ana, 81)
    assert len(issues) == 1
    assert "ZONE" in issues[0]


def test_detects_unparseable_zone():
    order = Order("Ana", "X-abc", [])
    assert OrderValidator([order]).validate_zone(order, 0)


def test_detects_urgency_regression():
    order = BrokenUrgencyOrder("Ana", "X-080", [3, 6])
    issues = OrderValidator([order]).validate_derived_fields()
    # a single vowel hides the missing factor
    assert issues == []

    order = BrokenUrgencyOrder("Anita", "X-080", [3, 6])
    issues = OrderValidator([order]).validate_derived_fields()
    assert len(issues) == 1
    assert "URGENCY" in issues[0]


def test_filtered_clean(mixed_orders):
    filtered = OrderProcessor.filter_by_zone_threshold(mixed_orders, 50)
    assert OrderValidator(mixed_orders).validate_filtered(filtered, 50) == []


def test_filtered_missing_and_extra(mixed_orders):
    validator = OrderValidator(mixed_orders)
    filtered = OrderProcessor.filter_by_zone_threshold(mixed_orders, 50)

    issues = validator.validate_filtered(filtered[1:], 50)
    assert any("missing" in issue for issue in issues)

    issues = validator.validate_filtered(filtered + [mixed_orders[1]], 50)
    assert any("at or below threshold" in issue for issue in issues)


def test_sorted_clean(mixed_orders):
    sorted_orders = OrderProcessor.sort_by_zone_then_client(mixed_orders)
    assert OrderValidator(mixed_orders).validate_sorted(sorted_orders, mixed_orders) == []


def test_sorted_detects_ordering_and_duplicates(ana, bob):
    validator = OrderValidator([ana, bob])
    issues = validator.validate_sorted([bob, ana, ana], [ana, bob])
    breakdown = categorize_validation_issues(issues)
    assert breakdown['ordering_errors'] >= 1
    assert breakdown['duplicates'] == 1


def test_sorted_detects_foreign_order(ana):
    stranger = Order("Zoe", "X-001", [])
    issues = OrderValidator([ana]).validate_sorted([ana, stranger], [ana])
    assert any("not in the source" in issue for issue in issues)


def test_groups_clean(mixed_orders):
    groups = OrderProcessor.group_by_urgency(mixed_orders)
    assert OrderValidator(mixed_orders).validate_groups(groups) == []


def test_groups_detect_reordered_queue(mixed_orders):
    groups = OrderProcessor.group_by_urgency(mixed_orders)
    groups[0] = deque(reversed(groups[0]))
    issues = OrderValidator(mixed_orders).validate_groups(groups)
    assert issues
    assert all("ORDER" in issue for issue in issues)


def test_groups_detect_missing_key(mixed_orders):
    groups = OrderProcessor.group_by_urgency(mixed_orders)
    del groups[48]
    issues = OrderValidator(mixed_orders).validate_groups(groups)
    assert any("urgency keys" in issue for issue in issues)


def test_exploded_clean(mixed_orders):
    groups = OrderProcessor.group_by_urgency(mixed_orders)
    stack = OrderProcessor.explode_dominant_group(groups)
    assert OrderValidator(mixed_orders).validate_exploded(stack) == []


def test_exploded_detects_fifo_order(ana, bob):
    issues = OrderValidator([ana, bob]).validate_exploded([ana, bob])
    assert len(issues) == 2


def test_exploded_empty():
    assert OrderValidator([]).validate_exploded(deque()) == []

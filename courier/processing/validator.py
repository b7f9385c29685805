# courier/processing/validator.py
"""Result validation by independent recomputation"""
from typing import Dict, List, Mapping, Optional, Sequence
from courier.models import Order
from courier.utils import fold_case


class OrderValidator:
    """Validates derived fields and transformation results

    Expected values are rebuilt from the raw order fields here rather than
    read back from Order.zone / Order.urgency, so a broken formula in the
    model shows up as an issue.
    """

    def __init__(self, orders: List[Order]):
        self.orders = orders

    # -------------------- derived fields --------------------

    @staticmethod
    def expected_zone(order: Order) -> Optional[int]:
        """Zone rebuilt from the last segment of the postal code, None if unparseable"""
        last_part = order.postal_code.rsplit('-', 1)[-1]
        try:
            return int(last_part)
        except ValueError:
            return None

    @staticmethod
    def expected_urgency(order: Order) -> int:
        """Urgency rebuilt from priorities and customer name"""
        multiples_of_three = 0
        for value in order.priorities:
            if value % 3 == 0:
                multiples_of_three += value

        unique_vowels = set()
        for char in order.customer_name.lower():
            if char in 'aeiou':
                unique_vowels.add(char)

        return multiples_of_three * len(unique_vowels)

    def validate_zone(self, order: Order, zone: int) -> List[str]:
        """Check a zone value against the postal code"""
        expected = self.expected_zone(order)
        if expected is None:
            return [f"❌ ZONE: could not parse postal code {order.postal_code!r} "
                    f"for customer {order.customer_name}"]
        if expected != zone:
            return [f"❌ ZONE: wrong zone for customer {order.customer_name} "
                    f"postal code {order.postal_code} -> expected {expected}, got {zone}"]
        return []

    def validate_urgency(self, order: Order, urgency: int) -> List[str]:
        """Check an urgency value against priorities and name"""
        expected = self.expected_urgency(order)
        if expected != urgency:
            return [f"❌ URGENCY: wrong urgency for customer {order.customer_name} "
                    f"priorities {order.priorities} -> expected {expected}, got {urgency}"]
        return []

    def validate_derived_fields(self) -> List[str]:
        """Check zone and urgency of every order"""
        issues = []
        for order in self.orders:
            issues.extend(self.validate_zone(order, order.zone))
            issues.extend(self.validate_urgency(order, order.urgency))
        return issues

    # -------------------- transformation results --------------------

    def validate_filtered(self, filtered: Sequence[Order], threshold: int) -> List[str]:
        """Every qualifying order present, nothing at or below threshold"""
        issues = []

        for order in filtered:
            zone = self.expected_zone(order)
            if zone is None or zone <= threshold:
                issues.append(
                    f"❌ MEMBERSHIP: filtered result holds {order.customer_name} "
                    f"with zone {zone} at or below threshold {threshold}"
                )

        expected = []
        for order in self.orders:
            zone = self.expected_zone(order)
            if zone is not None and zone > threshold:
                expected.append(order)
        if len(expected) != len(filtered):
            issues.append(
                f"❌ MEMBERSHIP: filtered result has {len(filtered)} orders, "
                f"expected {len(expected)} above threshold {threshold}"
            )
        filtered_ids = {id(o) for o in filtered}
        for order in expected:
            if id(order) not in filtered_ids:
                issues.append(
                    f"❌ MEMBERSHIP: {order.customer_name} above threshold "
                    f"{threshold} missing from filtered result"
                )

        return issues

    def validate_sorted(self, sorted_orders: Sequence[Order], source: Sequence[Order]) -> List[str]:
        """Strict (zone desc, name asc) order, no key duplicates, all from source"""
        issues = []
        keys = [(self.expected_zone(o), fold_case(o.customer_name)) for o in sorted_orders]

        seen = set()
        for key in keys:
            if key in seen:
                issues.append(f"⚠️ DUPLICATE: customer {key[1]} in zone {key[0]} appears twice")
            seen.add(key)

        for (zone1, name1), (zone2, name2) in zip(keys, keys[1:]):
            if zone1 < zone2:
                issues.append(
                    f"❌ ORDER: zone {zone1} ({name1}) placed before zone {zone2} ({name2})"
                )
            elif zone1 == zone2 and name1 > name2:
                issues.append(
                    f"❌ ORDER: customer {name1} placed before {name2} in zone {zone1}"
                )

        source_ids = {id(o) for o in source}
        for order in sorted_orders:
            if id(order) not in source_ids:
                issues.append(
                    f"❌ MEMBERSHIP: sorted result holds {order.customer_name} "
                    f"which is not in the source orders"
                )

        expected_keys = {(self.expected_zone(o), fold_case(o.customer_name)) for o in source}
        if expected_keys != seen:
            issues.append(
                f"❌ MEMBERSHIP: sorted result covers {len(seen)} distinct zone/customer "
                f"pairs, expected {len(expected_keys)}"
            )

        return issues

    def _expected_groups(self) -> Dict[int, List[Order]]:
        groups: Dict[int, List[Order]] = {}
        for order in self.orders:
            groups.setdefault(self.expected_urgency(order), []).append(order)
        return groups

    def validate_groups(self, groups: Mapping[int, Sequence[Order]]) -> List[str]:
        """Same urgency keys as the orders and the same order inside each group"""
        issues = []
        expected = self._expected_groups()

        if set(groups) != set(expected):
            issues.append(
                f"❌ MEMBERSHIP: urgency keys {sorted(groups)} do not match "
                f"expected {sorted(expected)}"
            )
        if list(groups) != sorted(groups):
            issues.append(f"❌ ORDER: urgency keys not ascending: {list(groups)}")

        for urgency, expected_group in expected.items():
            actual = list(groups.get(urgency, []))
            if len(actual) != len(expected_group):
                issues.append(
                    f"❌ MEMBERSHIP: urgency {urgency} holds {len(actual)} orders, "
                    f"expected {len(expected_group)}"
                )
                continue
            for position, (got, want) in enumerate(zip(actual, expected_group)):
                if got is not want:
                    issues.append(
                        f"❌ ORDER: urgency {urgency} position {position} holds "
                        f"{got.customer_name}, expected {want.customer_name}"
                    )

        return issues

    def validate_exploded(self, stack: Sequence[Order]) -> List[str]:
        """Stack matches the dominant group pushed in input order, top first"""
        issues = []
        expected = self._expected_groups()

        selected = None
        max_size = -1
        for urgency, group in expected.items():
            if len(group) > max_size or (len(group) == max_size and urgency > selected):
                max_size = len(group)
                selected = urgency

        expected_stack = list(reversed(expected.get(selected, [])))
        if len(expected_stack) != len(stack):
            issues.append(
                f"❌ MEMBERSHIP: exploded stack holds {len(stack)} orders, "
                f"expected {len(expected_stack)} for urgency {selected}"
            )
            return issues

        for position, (got, want) in enumerate(zip(stack, expected_stack)):
            if got is not want:
                issues.append(
                    f"❌ ORDER: exploded stack position {position} holds "
                    f"{got.customer_name}, expected {want.customer_name}"
                )

        return issues

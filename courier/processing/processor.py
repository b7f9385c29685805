# courier/processing/processor.py
"""Order transformations: filter, sort, group and explode"""
from collections import deque
from typing import Deque, Dict, Iterable, List, Mapping, Optional, Sequence
from courier.models import Order
from courier.utils import fold_case


class OrderProcessor:
    """Stateless transformations over collections of orders

    None of the operations mutate their inputs. A malformed postal code
    raises FormatError out of whichever operation evaluates the zone.
    """

    @staticmethod
    def filter_by_zone_threshold(orders: Iterable[Order], threshold: int) -> List[Order]:
        """Keep the orders whose zone is strictly greater than threshold"""
        return [order for order in orders if order.zone > threshold]

    @staticmethod
    def sort_by_zone_then_client(orders: Iterable[Order]) -> List[Order]:
        """
        Sort by zone descending, then customer name ascending ignoring case.
        Orders sharing both zone and case-folded name collapse to the first
        one seen, the way a sorted set drops elements that compare equal.
        """
        keyed = [(-order.zone, fold_case(order.customer_name), order) for order in orders]
        keyed.sort(key=lambda item: (item[0], item[1]))

        result = []
        previous_key = None
        for neg_zone, name, order in keyed:
            if (neg_zone, name) == previous_key:
                continue
            previous_key = (neg_zone, name)
            result.append(order)
        return result

    @staticmethod
    def group_by_urgency(orders: Iterable[Order]) -> Dict[int, Deque[Order]]:
        """Group orders by urgency, keys ascending, input order kept inside each group"""
        groups: Dict[int, Deque[Order]] = {}
        for order in orders:
            groups.setdefault(order.urgency, deque()).append(order)
        return {urgency: groups[urgency] for urgency in sorted(groups)}

    @staticmethod
    def select_dominant_urgency(urgency_groups: Mapping[int, Sequence[Order]]) -> Optional[int]:
        """Urgency of the largest group; ties go to the highest urgency"""
        if not urgency_groups:
            return None
        return max(urgency_groups, key=lambda urgency: (len(urgency_groups[urgency]), urgency))

    @staticmethod
    def explode_dominant_group(urgency_groups: Mapping[int, Sequence[Order]]) -> Deque[Order]:
        """
        Push every order of the dominant group onto a stack.
        The returned deque has the top of the stack at index 0, so the last
        order of the group comes first.
        """
        stack: Deque[Order] = deque()
        selected = OrderProcessor.select_dominant_urgency(urgency_groups)
        if selected is None:
            return stack

        for order in urgency_groups[selected]:
            stack.appendleft(order)
        return stack

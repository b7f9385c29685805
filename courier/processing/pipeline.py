# courier/processing/pipeline.py
"""Processing pipeline coordinating the order transformations"""
from typing import Dict, Any, List, Optional
from courier.models import Order
from courier.analysis import OrderAnalyzer
from courier.processing.processor import OrderProcessor
from courier.processing.validator import OrderValidator
from courier.config import ZONE_THRESHOLD, RUN_VALIDATION
from courier.utils import categorize_validation_issues, format_timestamp


class OrderPipeline:
    """Runs filter, sort, group and explode over a list of orders"""

    def __init__(self, orders: List[Order], threshold: int = ZONE_THRESHOLD,
                 run_validation: bool = RUN_VALIDATION):
        self.orders = orders
        self.threshold = threshold
        self.run_validation = run_validation
        self.validator = OrderValidator(orders)

    def run(self) -> Dict[str, Any]:
        """
        Run every transformation and collect the results.
        FormatError from a malformed postal code propagates to the caller.
        """
        print("\n🔎 Analyzing orders...")
        analysis = OrderAnalyzer.analyze(self.orders)
        self._print_analysis_summary(analysis)

        print(f"\n🚚 Filtering orders with zone > {self.threshold}...")
        filtered = OrderProcessor.filter_by_zone_threshold(self.orders, self.threshold)
        print(f"   Kept {len(filtered)}/{len(self.orders)} orders")

        print("🔃 Sorting by zone (desc) then customer (asc)...")
        sorted_orders = OrderProcessor.sort_by_zone_then_client(filtered)
        collapsed = len(filtered) - len(sorted_orders)
        if collapsed:
            print(f"   ⚠️  Collapsed {collapsed} order(s) sharing zone and customer")

        print("📦 Grouping by urgency...")
        groups = OrderProcessor.group_by_urgency(self.orders)
        print(f"   {len(groups)} urgency group(s)")

        dominant_urgency = OrderProcessor.select_dominant_urgency(groups)
        stack = OrderProcessor.explode_dominant_group(groups)
        print(f"💥 Dominant urgency: {dominant_urgency} ({len(stack)} orders)")

        validation_issues = []
        if self.run_validation:
            validation_issues = self.validate(filtered, sorted_orders, groups, stack)

        return {
            'analysis': analysis,
            'filtered': filtered,
            'sorted': sorted_orders,
            'groups': groups,
            'dominant_urgency': dominant_urgency,
            'stack': stack,
            'validation_issues': validation_issues
        }

    def validate(self, filtered: List[Order], sorted_orders: List[Order],
                 groups: Dict[int, Any], stack: Any) -> List[str]:
        """Validate every transformation result"""
        issues = []
        issues.extend(self.validator.validate_derived_fields())
        issues.extend(self.validator.validate_filtered(filtered, self.threshold))
        issues.extend(self.validator.validate_sorted(sorted_orders, filtered))
        issues.extend(self.validator.validate_groups(groups))
        issues.extend(self.validator.validate_exploded(stack))
        return issues

    @staticmethod
    def _order_entry(order: Order) -> Dict[str, Any]:
        entry = order.to_dict()
        entry['zone'] = order.zone
        entry['urgency'] = order.urgency
        return entry

    def build_complete_output(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """Build complete JSON-serializable output with all metadata"""
        analysis = results['analysis']
        dominant_urgency: Optional[int] = results['dominant_urgency']
        validation_issues = results['validation_issues']

        return {
            'run_id': format_timestamp(),
            'threshold': self.threshold,
            'filtered_orders': [self._order_entry(o) for o in results['filtered']],
            'sorted_orders': [self._order_entry(o) for o in results['sorted']],
            'urgency_groups': {
                str(urgency): [self._order_entry(o) for o in group]
                for urgency, group in results['groups'].items()
            },
            'dominant_group': {
                'urgency': dominant_urgency,
                'stack': [self._order_entry(o) for o in results['stack']]
            },
            'analysis': {
                'total_orders': analysis['total_orders'],
                'orders_by_zone': {str(k): v for k, v in sorted(analysis['orders_by_zone'].items())},
                'orders_by_urgency': {str(k): v for k, v in sorted(analysis['orders_by_urgency'].items())},
                'malformed_postal_codes': analysis['malformed_postal_codes'],
                'zero_urgency_orders': analysis['zero_urgency_orders']
            },
            'validation_issues': validation_issues,
            'issue_breakdown': categorize_validation_issues(validation_issues),
            'summary': {
                'total_orders': len(self.orders),
                'orders_above_threshold': len(results['filtered']),
                'orders_after_sort': len(results['sorted']),
                'urgency_groups': len(results['groups']),
                'dominant_urgency': dominant_urgency,
                'dominant_group_size': len(results['stack'])
            }
        }

    def _print_analysis_summary(self, analysis: Dict[str, Any]):
        """Print analysis summary"""
        print(f"\n📊 Analysis Summary:")
        print(f"   Total Orders: {analysis['total_orders']}")
        print(f"   Orders by Zone: {dict(sorted({k: len(v) for k, v in analysis['orders_by_zone'].items()}.items()))}")
        print(f"   Orders by Urgency: {dict(sorted({k: len(v) for k, v in analysis['orders_by_urgency'].items()}.items()))}")
        print(f"   Zero Urgency Orders: {len(analysis['zero_urgency_orders'])}")
        if analysis['malformed_postal_codes']:
            print(f"   ⚠️  Malformed Postal Codes: {', '.join(analysis['malformed_postal_codes'])}")

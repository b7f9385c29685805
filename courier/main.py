# courier/main.py
"""Main entry point for order processing"""
from typing import Dict, Any, List
from courier.config import ORDERS_FILE, OUTPUT_FILE, ZONE_THRESHOLD, MAX_ITEMS_IN_REPORT
from courier.io import DataLoader, ResultSaver
from courier.models import FormatError
from courier.processing import OrderPipeline
from courier.utils import categorize_validation_issues


class OutputFormatter:
    """Formats and displays processing results"""

    @staticmethod
    def print_results(output: Dict[str, Any]):
        """Pretty print processing results"""
        print("\n" + "="*80)
        print("📋 PROCESSING RESULTS")
        print("="*80)

        OutputFormatter._print_summary(output['summary'], output['threshold'])
        OutputFormatter._print_orders("🚚 SORTED ORDERS ABOVE THRESHOLD", output['sorted_orders'])
        OutputFormatter._print_groups(output['urgency_groups'])
        OutputFormatter._print_orders(
            f"💥 DOMINANT GROUP STACK (urgency {output['dominant_group']['urgency']}, top first)",
            output['dominant_group']['stack']
        )
        OutputFormatter._print_validation_issues(output['validation_issues'])

        print("\n" + "="*80)

    @staticmethod
    def _print_summary(summary: Dict, threshold: int):
        """Print summary section"""
        print(f"\n📊 SUMMARY:")
        print(f"   Zone Threshold: {threshold}")
        print(f"   Total Orders: {summary.get('total_orders', 0)}")
        print(f"   Above Threshold: {summary.get('orders_above_threshold', 0)}")
        print(f"   After Sort: {summary.get('orders_after_sort', 0)}")
        print(f"   Urgency Groups: {summary.get('urgency_groups', 0)}")
        print(f"   Dominant Group Size: {summary.get('dominant_group_size', 0)}")

    @staticmethod
    def _print_orders(title: str, orders: List[Dict[str, Any]]):
        """Print a list of order entries"""
        print(f"\n{title} ({len(orders)}):")
        print("-"*80)
        for entry in orders[:MAX_ITEMS_IN_REPORT]:
            print(f"   {entry['customer_name']:<20} {entry['postal_code']:<12} "
                  f"zone {entry['zone']:>4} | urgency {entry['urgency']:>4} | "
                  f"priorities {entry['priorities']}")
        if len(orders) > MAX_ITEMS_IN_REPORT:
            print(f"   ... {len(orders) - MAX_ITEMS_IN_REPORT} more")

    @staticmethod
    def _print_groups(groups: Dict[str, List[Dict[str, Any]]]):
        """Print urgency groups"""
        print(f"\n📦 URGENCY GROUPS ({len(groups)}):")
        print("-"*80)
        for urgency, entries in groups.items():
            names = ', '.join(e['customer_name'] for e in entries)
            print(f"   {urgency:>6}: [{len(entries)}] {names}")

    @staticmethod
    def _print_validation_issues(issues: List[str]):
        """Print validation issues"""
        if issues:
            breakdown = categorize_validation_issues(issues)
            print(f"\n❌ VALIDATION ISSUES ({len(issues)}):")
            print("-"*80)
            print(f"   Breakdown: {', '.join(f'{k}={v}' for k, v in breakdown.items() if v)}")
            for issue in issues:
                print(f"   • {issue}")
        else:
            print(f"\n✅ No validation issues found!")


def main(orders_file: str = ORDERS_FILE, output_file: str = OUTPUT_FILE,
         threshold: int = ZONE_THRESHOLD) -> int:
    """Main entry point"""
    # Load data
    print("📂 Loading data...")
    orders = DataLoader.load_orders(orders_file)

    pipeline = OrderPipeline(orders, threshold=threshold)

    try:
        results = pipeline.run()
        complete_output = pipeline.build_complete_output(results)
    except FormatError as e:
        print(f"❌ Malformed order data: {e}")
        return 1

    # Display results
    OutputFormatter.print_results(complete_output)

    ResultSaver().save_results(complete_output, output_file)

    return 1 if complete_output['validation_issues'] else 0


if __name__ == "__main__":
    raise SystemExit(main())

# courier/analysis/analyzer.py
"""Data analysis functionality"""
from typing import Dict, Any, List
from courier.models import Order, FormatError


class OrderAnalyzer:
    """Analyzes order data"""

    @staticmethod
    def analyze(orders: List[Order]) -> Dict[str, Any]:
        """Count orders per zone and per urgency, and collect malformed postal codes"""
        analysis = {
            'total_orders': len(orders),
            'orders_by_zone': {},
            'orders_by_urgency': {},
            'malformed_postal_codes': [],
            'zero_urgency_orders': []
        }

        for order in orders:
            # Group by zone
            try:
                zone = order.zone
            except FormatError:
                analysis['malformed_postal_codes'].append(order.postal_code)
            else:
                if zone not in analysis['orders_by_zone']:
                    analysis['orders_by_zone'][zone] = []
                analysis['orders_by_zone'][zone].append(order.customer_name)

            # Group by urgency
            urgency = order.urgency
            if urgency not in analysis['orders_by_urgency']:
                analysis['orders_by_urgency'][urgency] = []
            analysis['orders_by_urgency'][urgency].append(order.customer_name)

            if urgency == 0:
                analysis['zero_urgency_orders'].append(order.customer_name)

        return analysis

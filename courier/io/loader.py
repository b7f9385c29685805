# courier/io/loader.py
"""Data loading functionality"""
import json
from typing import List
from courier.models import Order


class DataLoader:
    """Handles loading of order data"""

    @staticmethod
    def load_json(filepath: str) -> List[dict]:
        """Load JSON file"""
        with open(filepath, 'r') as f:
            return json.load(f)

    @staticmethod
    def load_orders(orders_file: str) -> List[Order]:
        """Load orders from a JSON file"""
        orders_data = DataLoader.load_json(orders_file)
        orders = [Order.from_dict(o) for o in orders_data]

        print(f"Loaded {len(orders)} orders")

        return orders

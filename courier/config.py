# courier/config.py
"""Configuration settings for order processing"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# File paths
DATA_DIR = os.getenv('COURIER_DATA_DIR', './data')
ORDERS_FILE = os.path.join(DATA_DIR, 'orders.json')
OUTPUT_FILE = os.path.join(DATA_DIR, 'processing_results.json')

# Processing settings
ZONE_THRESHOLD = int(os.getenv('ZONE_THRESHOLD', '50'))
RUN_VALIDATION = os.getenv('RUN_VALIDATION', 'true').lower() in ('1', 'true', 'yes')

# Derived field rules
POSTAL_CODE_SEPARATOR = '-'
URGENCY_DIVISOR = 3
VOWELS = frozenset('aeiou')

# Report settings
MAX_ITEMS_IN_REPORT = 20

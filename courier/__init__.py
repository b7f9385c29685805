# courier/__init__.py
"""Delivery order zone and urgency processing"""

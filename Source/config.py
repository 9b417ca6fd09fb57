"""
Centralized configuration for Grocery Split with environment
"""

import os

# Thresholds
SETTLEMENT_EPSILON = float(os.getenv("GROCERY_SPLIT_SETTLEMENT_EPSILON", "0.01"))
REBALANCE_THRESHOLD = float(os.getenv("GROCERY_SPLIT_REBALANCE_THRESHOLD", "1.2"))

# Display
DEFAULT_CURRENCY = os.getenv("GROCERY_SPLIT_DEFAULT_CURRENCY", "USD")

# Logging
LOG_LEVEL = os.getenv("GROCERY_SPLIT_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("GROCERY_SPLIT_LOG_FILE", "")

"""
Core domain models, calendar math, text parsing/formatting and contracts.

This module contains the foundational building blocks that are independent
of search and scheduling logic.
"""

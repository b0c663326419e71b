"""
Core domain models, money math primitives, and contracts.

This module contains the foundational building blocks of the budget
engine that are independent of storage and presentation.
"""

"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the calculator
that are independent of the expression pipeline and of any UI.
"""

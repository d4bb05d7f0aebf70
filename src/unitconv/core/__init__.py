"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of any particular unit table: dimensions, units, quantities, exact/inexact
arithmetic and the registry table contract.
"""

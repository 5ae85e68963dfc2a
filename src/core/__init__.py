"""
Core scalar math primitives, result types, and report models.

This module contains the foundational building blocks: pure functions with
no dependency on external systems or shared state.
"""

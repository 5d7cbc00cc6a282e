"""
Core mathematical primitives and payload contracts.

This module contains the foundational building blocks that are independent
of the geometric models built on top of them.
"""

"""
Test suite for the coffee idle engine

Contains:
- tests/unit/ : Unit tests for individual modules
"""

"""Test suite for the forest fire simulation.

Run with: pytest tests/
"""

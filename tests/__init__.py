"""
Test suite for the split gate

Contains:
- tests/unit/          : Unit tests for individual modules and gates
- tests/factories.py   : Builders for credentials and transaction views
"""

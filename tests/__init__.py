"""
Test suite for the numeric operations library

Contains:
- tests/unit/          : Unit tests for individual modules, the service and the demo
"""

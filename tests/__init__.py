"""
Test suite for Budget Blueprint

Contains:
- tests/unit/          : Unit tests for engine modules, state layer and planner
"""

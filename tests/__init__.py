"""
Test Suite for Mess

Provides tests for:
- Schema loading, validation and key lookups
- Field value generation and value primitives
- Configuration management and utilities
- Command-line interface
"""

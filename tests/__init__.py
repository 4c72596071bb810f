#!/usr/bin/env python3
"""
Test suite for the Explorer Bridge Index.

All tests run offline; the LLM is always mocked.

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest (unittest-style modules only)
    python -m unittest discover tests -v
"""

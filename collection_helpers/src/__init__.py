"""
Top-level src package marker for collection_helpers.

This file ensures that 'src' is recognized as a Python package so that
imports like 'from collection_helpers.src.each import each' work reliably.
"""

"""In-memory feed model.

This package holds the aggregate populated by the reading engine.
"""

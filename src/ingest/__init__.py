"""Feed ingestion.

This package reads feed sources row by row and maps each row into
typed entities appended to a feed aggregate.
"""

"""Entity schema metadata.

This package maps feed columns onto entity attributes for each
registered GTFS file.
"""

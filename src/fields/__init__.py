"""Field value codecs for GTFS cell text."""

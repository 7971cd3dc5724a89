"""Shared errors, configuration, logging and typed models."""

"""Adapters – framework bindings for the search pipeline."""

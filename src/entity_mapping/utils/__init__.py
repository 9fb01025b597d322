"""Shared utilities for entity_mapping."""

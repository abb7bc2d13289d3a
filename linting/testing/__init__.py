"""Test placement and naming checks."""

"""Config-module checks."""

"""Integrations with host frameworks."""

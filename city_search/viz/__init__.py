"""Rendering helpers for the result list and details panel."""

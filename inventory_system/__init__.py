"""Inventory management service."""

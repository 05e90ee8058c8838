"""Shared utilities for the Fireworks API."""

"""Utilities for seeding, logging and parameter sweeps."""

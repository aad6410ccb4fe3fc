"""Core inventory logic."""

"""Utility modules for AI-Git."""

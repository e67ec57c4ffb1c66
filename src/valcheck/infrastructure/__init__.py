"""Adapters and composition root."""

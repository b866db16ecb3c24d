"""Add frame plugin."""

"""Image resize plugin."""

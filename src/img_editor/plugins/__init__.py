"""Edit operation plugins."""

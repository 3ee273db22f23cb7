"""HR management API."""

"""HTTP routes for the fitmarket API."""

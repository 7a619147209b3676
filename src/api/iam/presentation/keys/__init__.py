"""API key issuance presentation slice."""

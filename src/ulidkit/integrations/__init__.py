"""Framework integrations for ulidkit types."""

"""Host widget integrations."""

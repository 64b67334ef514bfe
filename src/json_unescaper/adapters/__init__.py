"""Host integrations for the sync controller."""

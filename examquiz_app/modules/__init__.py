"""Feature modules, one Flask blueprint each."""

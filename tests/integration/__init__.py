"""sunmoon integration tests."""

"""sunmoon unit tests."""

"""Integration tests that call the live model provider."""

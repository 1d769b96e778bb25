"""Adapters - configuration and other infrastructure around the domain."""

"""Upstream data providers and the fallback cascade that drives them."""

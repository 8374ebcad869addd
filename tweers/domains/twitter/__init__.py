"""Thin Twitter API client built on the OAuth signing domain."""

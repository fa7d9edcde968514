"""Adapters layer - Concrete implementations of the ports.

Subpackages:
- nlp: intent parsers and remote providers
- cache: in-memory and null caches
- repository: ride storage
"""

"""Core module for chain_registry."""

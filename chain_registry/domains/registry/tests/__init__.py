"""Tests for the registry domain."""

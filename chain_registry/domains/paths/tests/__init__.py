"""Tests for the paths domain."""

"""Tests for ``structmat.ops``."""

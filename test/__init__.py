"""Tests for ``structmat``."""

"""Tests for the biodata browser."""

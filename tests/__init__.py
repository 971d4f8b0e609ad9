"""Tests for the gift registry and its toast notifications."""

"""Unit tests for helpers that do not need the HTTP stack."""

"""Companion-process helpers used by the launcher."""

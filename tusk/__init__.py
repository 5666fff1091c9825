"""Tusk task-management API."""

"""Placement plugins: width resize and square resize."""

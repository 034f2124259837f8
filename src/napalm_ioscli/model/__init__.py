"""Typed records parsed from device output."""

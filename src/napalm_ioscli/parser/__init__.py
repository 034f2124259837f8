"""Parsers turning raw IOS command output into typed records."""

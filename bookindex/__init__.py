"""Tooling for book chapter indexes: render, parse, validate and check."""

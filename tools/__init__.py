"""Packaging tools: console and filesystem access, error types and the packager."""

"""Shared utilities for docsite."""

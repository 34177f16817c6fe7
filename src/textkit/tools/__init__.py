"""Reporting helpers for the CLI."""

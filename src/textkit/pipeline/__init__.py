"""Tokenize pipeline: data model and orchestration."""

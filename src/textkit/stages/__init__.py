"""Per-document tokenization stages."""

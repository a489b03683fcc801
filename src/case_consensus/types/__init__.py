"""Data contracts and identifiers for the case consensus engine."""

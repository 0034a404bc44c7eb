"""Snapshot generation: aggregation, models and the compressed writer."""

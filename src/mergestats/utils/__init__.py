"""Shared helpers for mergestats accumulators."""

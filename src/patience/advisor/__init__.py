"""Heuristic move scoring and suggestion."""

"""Utility helpers for bingovista."""

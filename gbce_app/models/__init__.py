"""
Report data models.
"""
from .metrics import MetricsSnapshot

__all__ = ["MetricsSnapshot"]

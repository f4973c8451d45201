"""Core business logic layer.

Subpackages:
- planning: meal selection, plan generation and the rotation run
- reporting: variety statistics over generated plans
"""
__all__ = ["planning", "reporting"]

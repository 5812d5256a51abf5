"""
Routers package for FastAPI endpoints.

Organized by domain:
- statements: Statement PDF and pasted-text parsing
- brokerage: Simulated brokerage connection
- analysis: Financial advice
"""

from . import analysis, brokerage, statements

__all__ = ["analysis", "brokerage", "statements"]

"""
Shared API state - one engine instance for all routes.
"""
from ..engine import QuoteEngine

engine = QuoteEngine()

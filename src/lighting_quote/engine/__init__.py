"""Engine subpackage - core quote computation and kit planning."""
from .quote_engine import QuoteEngine, compute_quote
from .models import MinimumRule, PricingConfig, QuoteRequest, Quote

__all__ = ['QuoteEngine', 'compute_quote', 'MinimumRule', 'PricingConfig', 'QuoteRequest', 'Quote']

# quotegen/core/__init__.py
"""Core quote generation components."""

from .config import QuoteConfig, ConfigurationError
from .quote_number import next_quote_number, QuoteNumberError
from .fields import build_replacements, normalize_key

__all__ = [
    'QuoteConfig',
    'ConfigurationError',
    'next_quote_number',
    'QuoteNumberError',
    'build_replacements',
    'normalize_key',
]

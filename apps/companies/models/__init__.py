"""
Company models module.
"""
from .company import Company

__all__ = [
    'Company',
]

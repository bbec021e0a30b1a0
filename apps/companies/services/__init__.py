"""
Company services module.
"""
from .company_service import CompanyService
from .directory_ranker import (
    DirectoryEntry, RankedEntry, SortKey, matches, rank, rank_with_loyalty
)

__all__ = [
    'CompanyService',
    'DirectoryEntry',
    'RankedEntry',
    'SortKey',
    'matches',
    'rank',
    'rank_with_loyalty',
]

"""
Listing views module.
"""
from .listing_views import (
    ListingListCreateView, ListingDetailView, AdminListingDeleteView
)

__all__ = [
    'ListingListCreateView',
    'ListingDetailView',
    'AdminListingDeleteView',
]

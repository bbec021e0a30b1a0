"""
Listing permissions.
"""
from apps.membership.permissions import capability_required

PUBLISH_CAPABILITY = 'create_listings'

CanPublishListings = capability_required(PUBLISH_CAPABILITY)

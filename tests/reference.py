"""
Reference loyalty table shared by the engine tests.
"""
from datetime import date

from apps.membership.config import build_loyalty_config

REFERENCE_THRESHOLDS = [0, 3, 12, 36]

REFERENCE_PRIVILEGES = {
    'explorer': ['view_network'],
    'participant': ['view_network', 'attend_events'],
    'contributor': ['view_network', 'attend_events', 'create_listings'],
    'champion': ['view_network', 'attend_events', 'create_listings', 'featured_badge', 'priority_visibility'],
}

REFERENCE_BADGES = {
    'explorer': '🌱',
    'participant': '🔵',
    'contributor': '🟢',
    'champion': '⭐',
}

# Fixed evaluation date for engine tests
REFERENCE_DATE = date(2026, 1, 15)

REFERENCE_CONFIG = build_loyalty_config(REFERENCE_THRESHOLDS, REFERENCE_PRIVILEGES, REFERENCE_BADGES)

"""
Clock used to sample "now" for loyalty calculations.

Views keep a reference to ``today`` as a class attribute so tests can swap in
a fixed date without patching module globals.
"""
from django.utils import timezone


def today():
    """Current date in the active time zone."""
    return timezone.localdate()

"""
User views module.
"""
from .auth_views import RegisterView, LoginView, MeView

__all__ = [
    'RegisterView',
    'LoginView',
    'MeView',
]

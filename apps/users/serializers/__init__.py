"""
User serializers module.
"""
from .user_serializers import (
    UserDetailSerializer, UserRegistrationSerializer, LoginSerializer
)

__all__ = [
    'UserDetailSerializer',
    'UserRegistrationSerializer',
    'LoginSerializer',
]

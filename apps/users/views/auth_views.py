"""
User authentication views.
"""
import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import update_last_login
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common.clock import today
from apps.common.utils import success_response, error_response
from apps.companies.serializers import CompanyListSerializer
from apps.membership.serializers import LoyaltySnapshotSerializer
from apps.membership.services import MembershipService
from ..models import User
from ..serializers import UserDetailSerializer, UserRegistrationSerializer, LoginSerializer

logger = logging.getLogger(__name__)
security_logger = logging.getLogger('security')


def _token_payload(user, request):
    refresh = RefreshToken.for_user(user)
    return {
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'user': UserDetailSerializer(user, context={'request': request}).data,
    }


class RegisterView(APIView):
    """Register a company and its first user"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        email = str(request.data.get('email', '')).strip().lower()
        if email and User.objects.filter(email__iexact=email).exists():
            return error_response('Email already registered', status_code=status.HTTP_409_CONFLICT)

        serializer = UserRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Registration failed', serializer.errors)

        user = serializer.save()
        logger.info(f"Registered user {user.id} for company {user.company_id}")
        return success_response(_token_payload(user, request), 'Registration successful')


class LoginView(APIView):
    """Email and password login"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Login failed', serializer.errors)

        email = serializer.validated_data['email'].lower()
        user = authenticate(request, email=email, password=serializer.validated_data['password'])
        if user is None:
            security_logger.warning(f"Failed login for {email}")
            return error_response('Invalid credentials', status_code=status.HTTP_401_UNAUTHORIZED)

        update_last_login(None, user)
        return success_response(_token_payload(user, request), 'Login successful')


class MeView(APIView):
    """The authenticated user, their company and its loyalty snapshot"""
    permission_classes = [IsAuthenticated]
    clock = staticmethod(today)

    def get(self, request):
        now = self.clock()
        company = request.user.company
        snapshot = MembershipService.loyalty_for_company(company, now)
        return success_response({
            'user': UserDetailSerializer(request.user).data,
            'company': CompanyListSerializer(company, context={'now': now}).data if company else None,
            'loyalty': LoyaltySnapshotSerializer(snapshot).data,
        })

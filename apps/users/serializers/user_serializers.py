"""
User serializers for registration, login and the current-user view.
"""
from django.contrib.auth.password_validation import validate_password
from django.db import transaction
from rest_framework import serializers

from apps.companies.models import Company
from ..models import User


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for the authenticated user.
    Used for: GET /api/auth/me/
    """
    is_admin = serializers.BooleanField(source='is_staff', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'company_id', 'is_admin', 'created_at']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """
    Registers a new company together with its first user.
    The company starts unapproved and without an enrollment date.
    """
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    company_name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    industry = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    size = serializers.ChoiceField(choices=Company.SIZE_CHOICES, required=False, allow_null=True)
    website = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)

    def validate_email(self, value):
        return User.objects.normalize_email(value).lower()

    def validate_company_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Company name cannot be blank')
        return value.strip()

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        email = validated_data.pop('email')
        password = validated_data.pop('password')
        company_fields = {key: value or None for key, value in validated_data.items()}

        with transaction.atomic():
            company = Company.objects.create(is_approved=False, **company_fields)
            user = User.objects.create_user(email=email, password=password, company=company)
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

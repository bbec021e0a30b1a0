"""
API tests for registration, login and the current-user endpoint.
"""
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from apps.companies.models import Company
from apps.users.models import User
from tests.factories import UserFactory, member_enrolled_months_ago


class RegisterTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.payload = {
            'email': 'founder@newco.example',
            'password': 'greenfuture',
            'company_name': 'NewCo Sustainability',
            'industry': 'Environment',
            'size': 'startup',
        }

    def test_creates_unapproved_company_and_user(self):
        response = self.client.post('/api/auth/register/', self.payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('token', response.data['data'])
        user = User.objects.get(email='founder@newco.example')
        self.assertEqual(user.company.company_name, 'NewCo Sustainability')
        self.assertFalse(user.company.is_approved)
        self.assertIsNone(user.company.membership_start_date)
        self.assertTrue(user.check_password('greenfuture'))

    def test_duplicate_email_conflicts(self):
        UserFactory(email='founder@newco.example')
        response = self.client.post('/api/auth/register/', self.payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertFalse(Company.objects.filter(company_name='NewCo Sustainability').exists())

    def test_company_name_required(self):
        self.payload.pop('company_name')
        response = self.client.post('/api/auth/register/', self.payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('company_name', response.data['errors'])

    def test_short_password_rejected(self):
        self.payload['password'] = 'abc'
        response = self.client.post('/api/auth/register/', self.payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.filter(email='founder@newco.example').exists())


class LoginTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory(email='eco@example.com')

    def test_valid_credentials_return_token(self):
        response = self.client.post(
            '/api/auth/login/', {'email': 'eco@example.com', 'password': 'password123'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['data']['token'])
        self.assertEqual(response.data['data']['user']['email'], 'eco@example.com')

    def test_wrong_password(self):
        response = self.client.post(
            '/api/auth/login/', {'email': 'eco@example.com', 'password': 'wrong'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['msg'], 'Invalid credentials')

    def test_unknown_email(self):
        response = self.client.post(
            '/api/auth/login/', {'email': 'nobody@example.com', 'password': 'password123'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_token_authenticates_requests(self):
        login = self.client.post(
            '/api/auth/login/', {'email': 'eco@example.com', 'password': 'password123'}, format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['data']['token']}")
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['user']['id'], self.user.id)


class MeTests(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_requires_authentication(self):
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_includes_company_and_loyalty(self):
        user = member_enrolled_months_ago(40, company_name='CircularMaterials Ltd')
        self.client.force_authenticate(user=user)
        response = self.client.get('/api/auth/me/')

        data = response.data['data']
        self.assertEqual(data['company']['company_name'], 'CircularMaterials Ltd')
        self.assertEqual(data['loyalty']['level'], 'Champion')
        self.assertIsNone(data['loyalty']['next_level'])
        self.assertFalse(data['user']['is_admin'])

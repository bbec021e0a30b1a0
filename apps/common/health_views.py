"""
Health check views for the directory server.
"""
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone
from django.views import View
import logging

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """
    Basic health check endpoint. No authentication required for monitoring tools.
    Includes database connectivity verification.
    """

    def get(self, request):
        health_response = {
            'status': 'ok',
            'timestamp': timezone.now().isoformat(),
        }

        db_ok, db_error = self._check_database_health()
        health_response['database'] = 'ok' if db_ok else 'unavailable'

        if not db_ok:
            health_response['status'] = 'degraded'
            logger.error(f"Database health check failed: {db_error}")
            return JsonResponse(health_response, status=503)

        return JsonResponse(health_response)

    def _check_database_health(self):
        """Run a trivial query; returns (ok, error_message)."""
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                row = cursor.fetchone()
        except Exception as e:
            return False, str(e)
        if row and row[0] == 1:
            return True, None
        return False, 'Unexpected query result'

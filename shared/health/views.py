"""
Health check views.
"""
import logging

from django.conf import settings
from django.db import connection
from django.core.cache import cache
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


@extend_schema(exclude=True)
class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy'})


@extend_schema(exclude=True)
class ReadinessCheckView(APIView):
    """Readiness check. The cache is reported but does not gate readiness."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'cache': self._check_cache(),
        }
        ready = checks['database']['healthy']

        return Response(
            {
                'status': 'ready' if ready else 'not_ready',
                'checks': checks,
            },
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    def _check_database(self) -> dict:
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {'healthy': False, 'error': 'database unavailable'}

    def _check_cache(self) -> dict:
        key = f"{getattr(settings, 'CACHE_NAMESPACE', 'asset_app')}:health_check"
        try:
            cache.set(key, 'ok', 10)
            if cache.get(key) == 'ok':
                return {'healthy': True}
            return {'healthy': False, 'error': 'cache read/write failed'}
        except Exception as e:
            logger.warning(f"Cache health check failed: {e}")
            return {'healthy': False, 'error': 'cache unavailable'}


@extend_schema(exclude=True)
class LivenessCheckView(APIView):
    """Liveness check - basic app responsiveness."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'alive'})

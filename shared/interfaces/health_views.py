"""
Health check views.
"""
import logging

from django.core.cache import cache
from django.db import connection
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


@extend_schema(tags=['Health'], summary="Liveness probe")
class LivenessCheckView(APIView):
    """Liveness probe - the process answers requests."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response(
            {'status': 'alive', 'timestamp': timezone.now().isoformat()},
            status=status.HTTP_200_OK,
        )


@extend_schema(tags=['Health'], summary="Readiness probe")
class ReadinessCheckView(APIView):
    """Readiness probe - the user store and the cache are reachable."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'cache': self._check_cache(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except Exception as e:
            logger.warning(f"Database readiness check failed: {e}")
            return {'healthy': False, 'error': e.__class__.__name__}

    def _check_cache(self):
        try:
            cache.set('health_check', 'ok', 10)
            return {'healthy': cache.get('health_check') == 'ok'}
        except Exception as e:
            logger.warning(f"Cache readiness check failed: {e}")
            return {'healthy': False, 'error': e.__class__.__name__}

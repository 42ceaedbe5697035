"""
Liveness and readiness checks.

Readiness requires the database to answer and the checkout tables to exist.
"""
import logging

from django.db import connection, DatabaseError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ('categories', 'products', 'carts', 'cart_items', 'orders', 'addresses')


def check_database():
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        return {'healthy': True}
    except DatabaseError as e:
        logger.warning(f"Readiness database check failed: {e}")
        return {'healthy': False, 'error': 'database unavailable'}


def check_schema():
    try:
        existing = set(connection.introspection.table_names())
    except DatabaseError as e:
        logger.warning(f"Readiness schema check failed: {e}")
        return {'healthy': False, 'error': 'schema unavailable'}
    missing = [name for name in REQUIRED_TABLES if name not in existing]
    if missing:
        return {'healthy': False, 'missing_tables': missing}
    return {'healthy': True}


class LivenessCheckView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'alive'})


class ReadinessCheckView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        checks = {'database': check_database()}
        if checks['database']['healthy']:
            checks['schema'] = check_schema()
        ready = all(check['healthy'] for check in checks.values())
        return Response(
            {'status': 'ready' if ready else 'not_ready', 'checks': checks},
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

# apps/core/views.py

import logging

from django.conf import settings
from django.core.cache import cache
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

from .models import AdminUser

logger = logging.getLogger(__name__)


@never_cache
@require_GET
def health_check(request):
    """
    Health check for monitoring
    """
    try:
        # Database
        AdminUser.objects.exists()

        # Cache (Redis in production)
        cache.set('health_check', 'ok', 60)
        if cache.get('health_check') != 'ok':
            raise RuntimeError("cache did not return the value just stored")

        status = {
            'status': 'healthy',
            'database': 'ok',
            'cache': 'ok',
            'timestamp': timezone.now().isoformat(),
            'version': settings.APP_VERSION
        }

        return JsonResponse(status)

    except Exception as e:
        logger.exception("Health check failed")
        status = {
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': timezone.now().isoformat(),
            'version': settings.APP_VERSION
        }

        return JsonResponse(status, status=500)

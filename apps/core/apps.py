# apps/core/apps.py

from django.apps import AppConfig
from django.contrib.admin.apps import AdminConfig


class CoreConfig(AppConfig):
    """Core app configuration"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'Core - Admin users'

    def ready(self):
        """
        Connect signals once the registry is ready
        """
        from . import signals  # noqa: F401

        import logging
        logger = logging.getLogger(__name__)
        logger.info("Core app ready - admin user signals connected")


class TaskdeskAdminConfig(AdminConfig):
    """Django admin using the Taskdesk site (dashboard index)"""

    default_site = 'apps.core.sites.TaskdeskAdminSite'

# apps/tasks/apps.py

from django.apps import AppConfig


class TasksConfig(AppConfig):
    """Tasks app configuration"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tasks'
    verbose_name = 'Projects & Tasks'

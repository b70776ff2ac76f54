# apps/core/signals.py

from django.contrib.auth.signals import user_logged_in
from django.db.models.signals import post_save
from django.dispatch import receiver

from .auth_service import auth_service
from .models import AdminUser


@receiver(post_save, sender=AdminUser)
def send_reset_password_instructions(sender, instance, created, raw=False, **kwargs):
    """
    New admin users receive password reset instructions

    Fixture loading (raw saves) is skipped.
    """
    if created and not raw:
        auth_service.send_reset_password_instructions(instance)


@receiver(user_logged_in)
def track_sign_in(sender, request, user, **kwargs):
    """Sign-in count, times and IPs"""
    if isinstance(user, AdminUser):
        auth_service.record_sign_in(user, request)

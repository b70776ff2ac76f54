# apps/core/auth_service.py

"""
Authentication service - the contract between Taskdesk and Django's auth

Password hashing, sessions and token checks belong to django.contrib.auth.
This service only adds what the admin needs on top of it: the reset
instructions sent to new admin users and the sign-in bookkeeping.
"""

import logging
from smtplib import SMTPException

from django.conf import settings
from django.contrib.auth.tokens import default_token_generator
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.urls import reverse
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Service around Django's authentication for admin users

    - send_reset_password_instructions: email a one-time reset link
    - record_sign_in: update the sign-in tracking fields
    """

    subject_template_name = 'registration/reset_instructions_subject.txt'
    email_template_name = 'registration/reset_instructions_email.txt'

    def __init__(self, token_generator=default_token_generator):
        self._token_generator = token_generator

    def reset_password_url(self, admin_user) -> str:
        """Absolute URL of the password reset confirmation page"""
        uid = urlsafe_base64_encode(force_bytes(admin_user.pk))
        token = self._token_generator.make_token(admin_user)
        path = reverse('password_reset_confirm', kwargs={'uidb64': uid, 'token': token})
        return f"{settings.BASE_URL.rstrip('/')}{path}"

    def send_reset_password_instructions(self, admin_user) -> bool:
        """
        Email reset instructions to an admin user

        Returns False when the mail server rejects the message; the
        failure is logged and the caller keeps going.
        """
        context = {
            'email': admin_user.email,
            'reset_url': self.reset_password_url(admin_user),
            'timeout_hours': settings.PASSWORD_RESET_TIMEOUT // 3600,
        }
        subject = ''.join(render_to_string(self.subject_template_name, context).splitlines())
        message = render_to_string(self.email_template_name, context)

        try:
            send_mail(
                subject=subject,
                message=message,
                from_email=settings.DEFAULT_FROM_EMAIL,
                recipient_list=[admin_user.email],
                fail_silently=False
            )
        except (SMTPException, OSError):
            logger.exception("Could not send reset instructions to %s", admin_user.email)
            return False

        logger.info("Reset password instructions sent to %s", admin_user.email)
        return True

    def record_sign_in(self, admin_user, request=None):
        """Update sign-in tracking after a successful login"""
        ip_address = None
        if request is not None:
            ip_address = request.META.get('REMOTE_ADDR') or None

        admin_user.record_sign_in(ip_address=ip_address)
        logger.debug("Sign-in #%s recorded for %s", admin_user.sign_in_count, admin_user.email)


# Global service instance
auth_service = AuthenticationService()

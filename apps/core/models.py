# apps/core/models.py

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone


class AdminUserManager(BaseUserManager):
    """
    Manager for admin users, identified by email

    A password is optional on creation: without one the account gets an
    unusable password and the owner sets it through the reset instructions.
    """

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("Admin users must have an email address")

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get('is_superuser') is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class AdminUser(AbstractBaseUser, PermissionsMixin):
    """
    Operator of the admin interface

    Admin users sign in with their email and can be assigned tasks.
    The sign-in fields are maintained by the authentication service
    on every successful login.
    """

    email = models.EmailField('email address', unique=True)

    # === SIGN-IN TRACKING ===
    sign_in_count = models.PositiveIntegerField(default=0)
    current_sign_in_at = models.DateTimeField(null=True, blank=True)
    last_sign_in_at = models.DateTimeField(null=True, blank=True)
    current_sign_in_ip = models.GenericIPAddressField(null=True, blank=True)
    last_sign_in_ip = models.GenericIPAddressField(null=True, blank=True)

    # === ACCESS ===
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(
        default=True,
        help_text="Designates whether the user can log into the admin site."
    )

    # === METADATA ===
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AdminUserManager()

    EMAIL_FIELD = 'email'
    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'admin_users'
        ordering = ['email']
        verbose_name = 'admin user'
        verbose_name_plural = 'admin users'

    def __str__(self):
        return self.email

    def clean(self):
        super().clean()
        self.email = self.__class__.objects.normalize_email(self.email)

    def get_full_name(self):
        return self.email

    def get_short_name(self):
        return self.email

    def record_sign_in(self, ip_address=None, at=None):
        """Shift the current sign-in into the last one and count it"""
        at = at or timezone.now()

        self.last_sign_in_at = self.current_sign_in_at or at
        self.last_sign_in_ip = self.current_sign_in_ip or ip_address
        self.current_sign_in_at = at
        self.current_sign_in_ip = ip_address
        self.sign_in_count = models.F('sign_in_count') + 1

        self.save(update_fields=[
            'last_sign_in_at', 'last_sign_in_ip',
            'current_sign_in_at', 'current_sign_in_ip',
            'sign_in_count',
        ])
        self.refresh_from_db(fields=['sign_in_count'])

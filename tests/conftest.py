# tests/conftest.py

from datetime import date

import pytest

from apps.core.models import AdminUser
from apps.tasks.models import Project, Task


@pytest.fixture()
def today():
    """Fixed reference date for scope tests"""
    return date(2026, 10, 18)


@pytest.fixture()
def admin(db):
    return AdminUser.objects.create_superuser('admin@example.com', 'password')


@pytest.fixture()
def other_admin(db):
    return AdminUser.objects.create_user('other@example.com')


@pytest.fixture()
def project(db):
    return Project.objects.create(title='Website relaunch')


@pytest.fixture()
def make_task(project, admin):
    """Factory for valid tasks; keyword arguments override the defaults"""

    def _make(**kwargs):
        fields = {
            'project': project,
            'admin_user': admin,
            'title': 'Task',
            'is_done': False,
        }
        fields.update(kwargs)
        return Task.objects.create(**fields)

    return _make


@pytest.fixture()
def admin_session(client, admin):
    """Test client signed in as the default admin"""
    client.force_login(admin)
    return client

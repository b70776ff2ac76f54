# tests/test_scopes.py

from datetime import datetime, time, timedelta

import pytest
from django.utils import timezone

from apps.tasks.models import Task

pytestmark = pytest.mark.django_db


def _titles(queryset):
    return set(queryset.values_list('title', flat=True))


@pytest.fixture()
def calendar(make_task, today):
    """One task per interesting due date around the reference day"""
    make_task(title='undated', due_date=None)
    make_task(title='last week', due_date=today - timedelta(days=7))
    make_task(title='yesterday', due_date=today - timedelta(days=1))
    make_task(title='today', due_date=today)
    make_task(title='tomorrow', due_date=today + timedelta(days=1))
    make_task(title='in six days', due_date=today + timedelta(days=6))
    make_task(title='in seven days', due_date=today + timedelta(days=7))
    make_task(title='next month', due_date=today + timedelta(days=30))


@pytest.fixture()
def afternoon(today):
    return timezone.make_aware(datetime.combine(today, time(15, 30)))


@pytest.fixture()
def midnight(today):
    return timezone.make_aware(datetime.combine(today, time.min))


class TestDueThisWeek:

    def test_includes_the_seventh_day_after_midnight(self, calendar, afternoon):
        assert _titles(Task.objects.due_this_week(afternoon)) == {
            'tomorrow', 'in six days', 'in seven days'
        }

    def test_strict_edges_at_midnight(self, calendar, midnight):
        assert _titles(Task.objects.due_this_week(midnight)) == {'tomorrow', 'in six days'}

    def test_plain_date_counts_as_midnight(self, calendar, today):
        assert _titles(Task.objects.due_this_week(today)) == {'tomorrow', 'in six days'}

    def test_defaults_to_current_time(self, make_task):
        make_task(title='soon', due_date=timezone.localdate() + timedelta(days=2))
        make_task(title='now', due_date=timezone.localdate())

        assert _titles(Task.objects.due_this_week()) == {'soon'}


class TestLate:

    def test_due_today_is_late_after_midnight(self, calendar, afternoon):
        assert _titles(Task.objects.late(afternoon)) == {'last week', 'yesterday', 'today'}
        assert 'today' not in _titles(Task.objects.due_this_week(afternoon))

    def test_due_exactly_now_is_neither_late_nor_due(self, calendar, midnight):
        assert _titles(Task.objects.late(midnight)) == {'last week', 'yesterday'}
        assert 'today' not in _titles(Task.objects.due_this_week(midnight))

    def test_plain_date_counts_as_midnight(self, calendar, today):
        assert _titles(Task.objects.late(today)) == {'last week', 'yesterday'}

    def test_done_tasks_still_count_as_late(self, make_task, today):
        make_task(title='done', is_done=True, due_date=today - timedelta(days=3))

        assert _titles(Task.objects.late(today)) == {'done'}


class TestMine:

    def test_only_assigned_tasks(self, make_task, admin, other_admin):
        make_task(title='mine')
        make_task(title='theirs', admin_user=other_admin)

        assert _titles(Task.objects.mine(admin)) == {'mine'}
        assert _titles(Task.objects.mine(other_admin)) == {'theirs'}

    def test_composes_with_other_scopes(self, make_task, admin, other_admin, today):
        make_task(title='mine late', due_date=today - timedelta(days=1))
        make_task(title='mine soon', due_date=today + timedelta(days=1))
        make_task(title='theirs late', admin_user=other_admin, due_date=today - timedelta(days=1))

        assert _titles(Task.objects.mine(admin).late(today)) == {'mine late'}
        assert _titles(Task.objects.late(today).mine(admin)) == {'mine late'}


def test_all_is_unfiltered(calendar):
    assert Task.objects.all().count() == 8


def test_task_due_tomorrow_scenario(make_task, project, other_admin, today):
    make_task(
        title='Draft release notes',
        project=project,
        admin_user=other_admin,
        is_done=False,
        due_date=today + timedelta(days=1),
    )

    assert _titles(Task.objects.mine(other_admin).due_this_week(today)) == {'Draft release notes'}
    assert not Task.objects.late(today).exists()


def test_task_due_yesterday_scenario(make_task, today):
    make_task(title='Overdue', is_done=False, due_date=today - timedelta(days=1))

    assert _titles(Task.objects.late(today)) == {'Overdue'}
    assert not Task.objects.due_this_week(today).exists()

# tests/test_panels.py

from datetime import date, timedelta

import pytest
from django.urls import reverse

from apps.tasks.models import Project
from apps.tasks.panels import (
    TASK_TABLE_COLUMNS, AttributesPanel, Column, TablePanel, dashboard_panels,
    due_date_display, project_panels, status_label, status_tag, task_panels,
    task_sidebar, title_link
)

pytestmark = pytest.mark.django_db


class TestCells:

    def test_status_labels(self, make_task):
        assert status_label(make_task(is_done=True)) == 'Done'
        assert status_label(make_task(is_done=False)) == 'Pending'

    def test_status_tag_classes(self, make_task):
        assert 'class="status_tag ok"' in status_tag(make_task(is_done=True))
        assert 'class="status_tag error"' in status_tag(make_task(is_done=False))

    def test_due_date_long_form(self, make_task):
        assert due_date_display(make_task(due_date=date(2015, 10, 29))) == 'October 29, 2015'

    def test_missing_due_date_is_a_dash(self, make_task):
        assert due_date_display(make_task(due_date=None)) == '-'

    def test_title_links_to_show_page(self, make_task):
        task = make_task(title='<b>Bold</b>')
        link = title_link(task)

        assert reverse('admin:tasks_task_show', args=[task.pk]) in link
        assert '&lt;b&gt;Bold&lt;/b&gt;' in link


class TestPanels:

    def test_table_headers_and_rows(self, make_task, admin):
        task = make_task(title='Homepage', is_done=True, due_date=None)
        panel = TablePanel('Tasks', TASK_TABLE_COLUMNS, [task])

        assert panel.headers == ['Status', 'Title', 'Assigned To', 'Due Date']
        status, title, assignee, due = panel.rows[0]
        assert 'Done' in status
        assert 'Homepage' in title
        assert assignee == admin.email
        assert due == '-'

    def test_attributes_rows(self, make_task):
        task = make_task(title='Homepage')
        panel = AttributesPanel('Details', [Column('Title', lambda t: t.title)], task)

        assert panel.rows == [('Title', 'Homepage')]

    def test_dashboard_lists_only_my_tasks(self, make_task, admin, other_admin, today):
        make_task(title='mine soon', due_date=today + timedelta(days=2))
        make_task(title='mine late', due_date=today - timedelta(days=2))
        make_task(title='theirs soon', admin_user=other_admin, due_date=today + timedelta(days=2))
        make_task(title='theirs late', admin_user=other_admin, due_date=today - timedelta(days=2))

        this_week, late = dashboard_panels(admin, now=today)

        assert this_week.title == 'Your tasks for this week'
        assert late.title == 'Tasks that are late'
        assert [t.title for t in this_week.objects] == ['mine soon']
        assert [t.title for t in late.objects] == ['mine late']

    def test_project_panel_lists_project_tasks(self, make_task, project):
        make_task(title='Homepage')
        make_task(title='Elsewhere', project=Project.objects.create(title='Intranet'))

        (panel,) = project_panels(project)

        assert panel.title == 'Tasks'
        assert [t.title for t in panel.objects] == ['Homepage']

    def test_task_details_rows(self, make_task, project, admin):
        task = make_task(title='Homepage', due_date=date(2015, 10, 29))

        (panel,) = task_panels(task)
        rows = dict(panel.rows)

        assert panel.title == 'Task Details'
        assert list(rows) == ['Status', 'Title', 'Project', 'Assigned To', 'Due Date']
        assert project.title in rows['Project']
        assert admin.email in rows['Assigned To']
        assert rows['Due Date'] == 'October 29, 2015'

    def test_sidebar_shows_current_admins_tasks_on_project(self, make_task, admin, other_admin):
        task = make_task(title='Homepage', admin_user=other_admin)
        make_task(title='Footer')
        make_task(title='Header', admin_user=other_admin)

        sidebar = task_sidebar(task, admin)

        assert sidebar.title == 'Other Tasks For This User'
        assert sidebar.headers == ['Status', 'Title']
        assert [t.title for t in sidebar.objects] == ['Footer']

# apps/tasks/panels.py

"""
Panels - labelled tables and attribute lists shown by the admin pages

Each page declares its columns or rows here as plain configuration; the
generic template admin/includes/panel.html renders any panel.
"""

from django.conf import settings
from django.urls import reverse
from django.utils import dateformat
from django.utils.html import format_html

from .models import Task

EMPTY_VALUE = '-'


class Column:
    """Label plus a callable turning an object into a cell"""

    def __init__(self, label, value):
        self.label = label
        self.value = value

    def render(self, obj):
        return self.value(obj)


class TablePanel:
    """Panel listing objects as a table, one column per Column"""

    template_kind = 'table'

    def __init__(self, title, columns, objects, empty_message='No tasks.'):
        self.title = title
        self.columns = list(columns)
        self.objects = objects
        self.empty_message = empty_message

    @property
    def headers(self):
        return [column.label for column in self.columns]

    @property
    def rows(self):
        return [
            [column.render(obj) for column in self.columns]
            for obj in self.objects
        ]


class AttributesPanel:
    """Panel listing one object's attributes as label/value rows"""

    template_kind = 'attributes'

    def __init__(self, title, rows, obj):
        self.title = title
        self.rows_config = list(rows)
        self.obj = obj

    @property
    def rows(self):
        return [(row.label, row.render(self.obj)) for row in self.rows_config]


# === CELLS ===

def status_label(task):
    return task.status


def status_tag(task):
    css_class = 'ok' if task.is_done else 'error'
    return format_html(
        '<span class="status_tag {}">{}</span>', css_class, status_label(task)
    )


def due_date_display(task):
    """Long-form due date, or a dash when there is none"""
    if not task.due_date:
        return EMPTY_VALUE
    return dateformat.format(task.due_date, settings.TASKDESK_DUE_DATE_FORMAT)


def task_show_url(task):
    return reverse('admin:tasks_task_show', args=[task.pk])


def project_show_url(project):
    return reverse('admin:tasks_project_show', args=[project.pk])


def title_link(task):
    return format_html('<a href="{}">{}</a>', task_show_url(task), task.title)


def project_link(task):
    return format_html(
        '<a href="{}">{}</a>', project_show_url(task.project), task.project.title
    )


def assignee_email(task):
    return task.admin_user.email


def assignee_link(task):
    url = reverse('admin:core_adminuser_change', args=[task.admin_user_id])
    return format_html('<a href="{}">{}</a>', url, task.admin_user.email)


# === PAGE CONFIGURATION ===

TASK_TABLE_COLUMNS = [
    Column('Status', status_tag),
    Column('Title', title_link),
    Column('Assigned To', assignee_email),
    Column('Due Date', due_date_display),
]

TASK_SIDEBAR_COLUMNS = [
    Column('Status', status_tag),
    Column('Title', title_link),
]

TASK_DETAIL_ROWS = [
    Column('Status', status_tag),
    Column('Title', title_link),
    Column('Project', project_link),
    Column('Assigned To', assignee_link),
    Column('Due Date', due_date_display),
]


# === PAGES ===

def dashboard_panels(admin_user, now=None):
    """The signed-in admin's tasks due this week, then their late tasks"""
    mine = Task.objects.mine(admin_user).with_relations()

    return [
        TablePanel(
            "Your tasks for this week",
            TASK_TABLE_COLUMNS,
            mine.due_this_week(now),
        ),
        TablePanel(
            "Tasks that are late",
            TASK_TABLE_COLUMNS,
            mine.late(now),
        ),
    ]


def project_panels(project):
    return [
        TablePanel(
            "Tasks",
            TASK_TABLE_COLUMNS,
            Task.objects.for_project(project).with_relations(),
        ),
    ]


def task_panels(task):
    return [AttributesPanel("Task Details", TASK_DETAIL_ROWS, task)]


def task_sidebar(task, admin_user):
    return TablePanel(
        "Other Tasks For This User",
        TASK_SIDEBAR_COLUMNS,
        task.other_tasks_for(admin_user).with_relations(),
    )

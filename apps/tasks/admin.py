# apps/tasks/admin.py

import logging

from django.contrib import admin, messages
from django.contrib.admin.utils import unquote
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.shortcuts import redirect
from django.template.response import TemplateResponse
from django.urls import path
from django.utils.html import format_html

from .forms import TaskCommentForm
from .models import Project, Task, TaskComment
from .panels import (
    due_date_display, project_panels, project_show_url, status_tag,
    task_panels, task_show_url, task_sidebar
)

logger = logging.getLogger(__name__)


class ShowViewMixin:
    """
    Read-only "show" page next to the change form

    Subclasses provide get_show_context(request, obj).
    """

    show_template = None

    def get_urls(self):
        info = self.opts.app_label, self.opts.model_name
        urls = [
            path(
                '<path:object_id>/show/',
                self.admin_site.admin_view(self.show_view),
                name='%s_%s_show' % info,
            ),
        ]
        return urls + super().get_urls()

    def get_show_object(self, request, object_id):
        obj = self.get_object(request, unquote(object_id))
        if obj is None:
            raise Http404(f"{self.opts.verbose_name.capitalize()} with ID “{object_id}” doesn’t exist.")
        if not self.has_view_or_change_permission(request, obj):
            raise PermissionDenied
        return obj

    def get_show_context(self, request, obj):
        return {}

    def render_show(self, request, obj, extra_context=None):
        context = {
            **self.admin_site.each_context(request),
            'title': str(obj),
            'subtitle': None,
            'object': obj,
            'opts': self.opts,
            'app_label': self.opts.app_label,
            'has_change_permission': self.has_change_permission(request, obj),
            **self.get_show_context(request, obj),
            **(extra_context or {}),
        }
        request.current_app = self.admin_site.name
        return TemplateResponse(request, self.show_template, context)

    def show_view(self, request, object_id):
        obj = self.get_show_object(request, object_id)
        return self.render_show(request, obj)


class TaskScopeFilter(admin.SimpleListFilter):
    """Scopes of the task list: all (default), due this week, late, mine"""

    title = 'scope'
    parameter_name = 'scope'

    def lookups(self, request, model_admin):
        return [
            ('due_this_week', 'Due this week'),
            ('late', 'Late'),
            ('mine', 'Mine'),
        ]

    def queryset(self, request, queryset):
        scope = self.value()
        if scope == 'due_this_week':
            return queryset.due_this_week()
        if scope == 'late':
            return queryset.late()
        if scope == 'mine':
            return queryset.mine(request.user)
        return queryset


class TaskInline(admin.TabularInline):
    """Project tasks, editable from the project form"""
    model = Task
    extra = 0
    fields = ['title', 'admin_user', 'is_done', 'due_date']
    ordering = ['due_date', 'id']


class TaskCommentInline(admin.TabularInline):
    """Comments on the task form, read-only"""
    model = TaskComment
    extra = 0
    fields = ['author', 'body', 'created_at']
    readonly_fields = ['author', 'body', 'created_at']

    def has_add_permission(self, request, obj=None):
        """Comments are added from the show page"""
        return False


@admin.register(Project)
class ProjectAdmin(ShowViewMixin, admin.ModelAdmin):
    """Admin for projects"""

    show_template = 'admin/tasks/project/show.html'

    list_display = ['title_link', 'tasks_count']
    search_fields = ['title']
    readonly_fields = ['created_at', 'updated_at']
    fields = ['title', 'created_at', 'updated_at']
    inlines = [TaskInline]

    @admin.display(description='Title', ordering='title')
    def title_link(self, obj):
        """Title linked to the show page"""
        return format_html('<a href="{}">{}</a>', project_show_url(obj), obj.title)

    @admin.display(description='Tasks')
    def tasks_count(self, obj):
        return obj.tasks.count()

    def get_show_context(self, request, project):
        return {'panels': project_panels(project)}


@admin.register(Task)
class TaskAdmin(ShowViewMixin, admin.ModelAdmin):
    """Admin for tasks, with scopes and a show page with comments"""

    show_template = 'admin/tasks/task/show.html'

    list_display = [
        'id', 'status', 'title_link', 'project', 'admin_user', 'due_date_long'
    ]
    list_display_links = ['id']
    list_filter = [
        TaskScopeFilter, 'is_done', 'project', 'admin_user', 'due_date'
    ]
    search_fields = ['title', 'project__title', 'admin_user__email']
    list_select_related = ['project', 'admin_user']
    date_hierarchy = 'due_date'
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Task Details', {
            'fields': ('title', 'project', 'admin_user', 'is_done', 'due_date')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        })
    )

    inlines = [TaskCommentInline]

    @admin.display(description='Status', ordering='is_done')
    def status(self, obj):
        return status_tag(obj)

    @admin.display(description='Title', ordering='title')
    def title_link(self, obj):
        """Title linked to the show page"""
        return format_html('<a href="{}">{}</a>', task_show_url(obj), obj.title)

    @admin.display(description='Due Date', ordering='due_date')
    def due_date_long(self, obj):
        return due_date_display(obj)

    def get_show_context(self, request, task):
        return {
            'panels': task_panels(task),
            'sidebar': task_sidebar(task, request.user),
            'comments': task.comments.select_related('author'),
        }

    def show_view(self, request, object_id):
        task = self.get_show_object(request, object_id)
        form = TaskCommentForm()

        if request.method == 'POST':
            form = TaskCommentForm(request.POST)

            if form.is_valid():
                comment = form.save_for(task, request.user)
                logger.info("Comment %s added to task %s by %s", comment.pk, task.pk, request.user)
                messages.success(request, 'Comment was successfully created.')
                return redirect(task_show_url(task))

            messages.error(request, 'Comment could not be saved.')

        return self.render_show(request, task, {'comment_form': form})

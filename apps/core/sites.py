# apps/core/sites.py

from django.contrib import admin


class TaskdeskAdminSite(admin.AdminSite):
    """
    Admin site whose index page is the dashboard

    The dashboard lists the signed-in admin's tasks due this week and
    their late tasks above the usual application list.
    """

    site_header = 'Taskdesk Admin'
    site_title = 'Taskdesk'
    index_title = 'Dashboard'
    index_template = 'admin/dashboard.html'

    def index(self, request, extra_context=None):
        from apps.tasks.panels import dashboard_panels

        context = {
            'panels': dashboard_panels(request.user),
            **(extra_context or {}),
        }
        return super().index(request, extra_context=context)

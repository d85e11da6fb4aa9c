from django.urls import re_path
from .views import DashboardView, ProjectRiskView, TaskDetailView, TaskListView

urlpatterns = [
    re_path(r'^tasks/?$', TaskListView.as_view(), name='task-list'),
    re_path(r'^tasks/(?P<pk>[^/]+)/?$', TaskDetailView.as_view(), name='task-detail'),
    re_path(r'^risk/project/?$', ProjectRiskView.as_view(), name='project-risk'),
    re_path(r'^dashboard/?$', DashboardView.as_view(), name='dashboard'),
]

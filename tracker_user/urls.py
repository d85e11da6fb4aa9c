from django.urls import re_path
from .views import PersonDetailView, PersonListView, SeedCheckView

urlpatterns = [
    re_path(r'^users/?$', PersonListView.as_view(), name='person-list'),
    re_path(r'^users/check/?$', SeedCheckView.as_view(), name='person-check'),
    re_path(r'^users/(?P<pk>[^/]+)/?$', PersonDetailView.as_view(), name='person-detail'),
]

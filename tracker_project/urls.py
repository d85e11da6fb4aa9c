from django.urls import include, re_path

from .views import HealthView, IndexView

urlpatterns = [
    re_path(r'^$', IndexView.as_view(), name='index'),
    re_path(r'^api/health/?$', HealthView.as_view(), name='health'),
    re_path(r'^api/', include('tracker_app.urls')),
    re_path(r'^api/', include('tracker_user.urls')),
]

handler404 = 'tracker_project.views.route_not_found'
handler500 = 'tracker_project.views.internal_error'

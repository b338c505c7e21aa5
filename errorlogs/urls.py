from django.urls import path
from .views import ErrorLogListView, ErrorLogDetailView

urlpatterns = [
    path("", ErrorLogListView.as_view(), name="error-log-list"),
    path("<int:pk>/", ErrorLogDetailView.as_view(), name="error-log-detail"),
]

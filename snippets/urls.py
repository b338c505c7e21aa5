from django.urls import path
from .views import SnippetListCreateView, SnippetDetailView, SnippetUsageView

urlpatterns = [
    path("", SnippetListCreateView.as_view(), name="snippet-list"),
    path("<int:pk>/", SnippetDetailView.as_view(), name="snippet-detail"),
    path("<int:pk>/usage/", SnippetUsageView.as_view(), name="snippet-usage"),
]

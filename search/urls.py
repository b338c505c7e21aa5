from django.urls import path
from .views import EmbedView, SearchView

urlpatterns = [
    path("embed/", EmbedView.as_view(), name="embed"),
    path("search/", SearchView.as_view(), name="search"),
]

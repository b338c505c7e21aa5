from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('authapi.urls')),
    path('api/notes/', include('notes.urls')),
    path('api/', include('ai.urls')),
    path('api/', include('search.urls')),
    path('api/snippets/', include('snippets.urls')),
    path('api/journal/', include('journal.urls')),
    path('api/errors/', include('errorlogs.urls')),
]

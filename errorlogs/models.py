from django.db import models
from django.contrib.auth.models import User

from notes.models import Note


class ErrorLog(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="error_logs")
    note = models.ForeignKey(Note, null=True, blank=True, on_delete=models.SET_NULL, related_name="error_logs")
    error_text = models.TextField()
    language = models.CharField(max_length=50, blank=True, default="")
    framework = models.CharField(max_length=50, null=True, blank=True)
    ai_explanation = models.TextField(blank=True, default="")
    ai_solution = models.JSONField(default=list, blank=True)
    is_resolved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

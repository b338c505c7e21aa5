from django.db import models
from django.contrib.auth.models import User

from notes.models import Note


class Snippet(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="snippets")
    note = models.ForeignKey(Note, null=True, blank=True, on_delete=models.SET_NULL, related_name="snippets")
    title = models.CharField(max_length=200)
    code = models.TextField()
    language = models.CharField(max_length=50)
    description = models.TextField(null=True, blank=True)
    tags = models.JSONField(default=list, blank=True)
    usage_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

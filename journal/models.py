from django.db import models
from django.contrib.auth.models import User


class DevJournalEntry(models.Model):
    MOOD_CHOICES = (
        ("productive", "Productive"),
        ("learning", "Learning"),
        ("challenging", "Challenging"),
        ("frustrated", "Frustrated"),
        ("excited", "Excited"),
    )

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="journal_entries")
    date = models.DateField()
    content = models.TextField(null=True, blank=True)
    mood = models.CharField(max_length=20, choices=MOOD_CHOICES, null=True, blank=True)
    tech_used = models.JSONField(default=list, blank=True)
    achievements = models.JSONField(default=list, blank=True)
    blockers = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "date"], name="uniq_journal_entry_per_day")
        ]

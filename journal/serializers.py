from rest_framework import serializers
from .models import DevJournalEntry


class StringListField(serializers.ListField):
    child = serializers.CharField()


class DevJournalEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = DevJournalEntry
        fields = [
            "id",
            "date",
            "content",
            "mood",
            "tech_used",
            "achievements",
            "blockers",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class JournalUpsertSerializer(serializers.Serializer):
    date = serializers.DateField()
    content = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    mood = serializers.ChoiceField(
        choices=DevJournalEntry.MOOD_CHOICES,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    tech_used = StringListField(required=False, allow_null=True)
    achievements = StringListField(required=False, allow_null=True)
    blockers = StringListField(required=False, allow_null=True)

    def to_defaults(self):
        data = self.validated_data
        return {
            "content": data.get("content") or None,
            "mood": data.get("mood") or None,
            "tech_used": data.get("tech_used") or [],
            "achievements": data.get("achievements") or [],
            "blockers": data.get("blockers") or [],
        }

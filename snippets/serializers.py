from rest_framework import serializers

from core.fields import TagListField
from notes.models import Note
from .models import Snippet


class SnippetSerializer(serializers.ModelSerializer):
    tags = TagListField(required=False)
    note_id = serializers.PrimaryKeyRelatedField(
        source="note",
        queryset=Note.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Snippet
        fields = [
            "id",
            "note_id",
            "title",
            "code",
            "language",
            "description",
            "tags",
            "usage_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "usage_count", "created_at", "updated_at"]
        extra_kwargs = {
            "description": {"required": False, "allow_null": True, "allow_blank": True},
        }

    def validate_note_id(self, value):
        request = self.context.get("request")
        if value is not None and request is not None and value.user_id != request.user.id:
            raise serializers.ValidationError("Note not found.")
        return value

    def validate_description(self, value):
        return value or None

from rest_framework import serializers

from core.fields import TagListField
from .models import Note


class NoteSerializer(serializers.ModelSerializer):
    tags = TagListField(required=False)

    class Meta:
        model = Note
        fields = ["id", "title", "content", "summary", "tags", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {
            "title": {"required": False},
            "content": {"required": False, "allow_blank": True},
            "summary": {"required": False, "allow_null": True, "allow_blank": True},
        }

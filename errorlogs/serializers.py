from rest_framework import serializers
from .models import ErrorLog


class ErrorLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = ErrorLog
        fields = [
            "id",
            "note",
            "error_text",
            "language",
            "framework",
            "ai_explanation",
            "ai_solution",
            "is_resolved",
            "created_at",
        ]
        read_only_fields = [
            "id",
            "note",
            "error_text",
            "language",
            "framework",
            "ai_explanation",
            "ai_solution",
            "created_at",
        ]

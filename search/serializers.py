from rest_framework import serializers

from notes.serializers import NoteSerializer


class SearchResultSerializer(NoteSerializer):
    similarity = serializers.FloatField(read_only=True)

    class Meta(NoteSerializer.Meta):
        fields = NoteSerializer.Meta.fields + ["similarity"]

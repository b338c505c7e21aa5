from rest_framework import generics
from rest_framework.permissions import IsAuthenticated

from core.permissions import IsOwner
from search.services import content_changed, schedule_note_embedding
from .models import Note
from .serializers import NoteSerializer


class NoteListCreateView(generics.ListCreateAPIView):
    serializer_class = NoteSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Note.objects.filter(user=self.request.user).order_by("-updated_at")

    def perform_create(self, serializer):
        note = serializer.save(user=self.request.user)
        if note.content.strip():
            schedule_note_embedding(note.id, note.content)


class NoteDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = NoteSerializer
    permission_classes = [IsAuthenticated, IsOwner]

    def get_queryset(self):
        return Note.objects.filter(user=self.request.user)

    def perform_update(self, serializer):
        previous_content = serializer.instance.content
        note = serializer.save()
        # Last write wins; concurrent tabs can overwrite each other.
        if content_changed(previous_content, note.content):
            schedule_note_embedding(note.id, note.content)

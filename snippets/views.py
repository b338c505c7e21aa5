import logging

from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ai.services import suggest_tags_or_empty
from core.permissions import IsOwner
from .models import Snippet
from .serializers import SnippetSerializer
from .services import increment_usage

logger = logging.getLogger(__name__)


class SnippetListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            snippets = Snippet.objects.filter(user=request.user).order_by("-usage_count", "-updated_at")
            data = SnippetSerializer(snippets, many=True).data
        except Exception as exc:
            logger.exception("Snippets GET error")
            return Response({"error": str(exc) or "Failed to fetch snippets"}, status=500)
        return Response({"snippets": data})

    def post(self, request):
        title = request.data.get("title")
        code = request.data.get("code")
        language = request.data.get("language")
        if not title or not code or not language:
            return Response({"error": "Title, code, and language are required"}, status=400)

        serializer = SnippetSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)

        tags = serializer.validated_data.get("tags")
        if not tags:
            tags = suggest_tags_or_empty(f"{title}\n\n{code}")

        try:
            snippet = serializer.save(user=request.user, tags=tags)
        except Exception as exc:
            logger.exception("Snippets POST error")
            return Response({"error": str(exc) or "Failed to create snippet"}, status=500)
        return Response({"snippet": SnippetSerializer(snippet).data}, status=201)


class SnippetDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = SnippetSerializer
    permission_classes = [IsAuthenticated, IsOwner]

    def get_queryset(self):
        return Snippet.objects.filter(user=self.request.user)


class SnippetUsageView(APIView):
    """Called by the client each time a snippet is copied."""
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        try:
            found = increment_usage(pk, request.user)
        except Exception as exc:
            logger.exception("Usage increment error")
            return Response({"error": str(exc) or "Failed to increment usage"}, status=500)
        if not found:
            return Response({"error": "Snippet not found"}, status=404)
        return Response({"success": True})

import logging

from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAuthenticatedOrServiceRole, has_service_role
from notes.models import Note
from .serializers import SearchResultSerializer
from .services import InvalidFilterError, embed_note, semantic_search

logger = logging.getLogger(__name__)


def _acts_for(request, user_id):
    if has_service_role(request):
        return True
    return str(user_id) == str(request.user.id)


class EmbedView(APIView):
    permission_classes = [IsAuthenticatedOrServiceRole]

    def post(self, request):
        note_id = request.data.get("noteId")
        content = request.data.get("content")
        if not note_id or not content:
            return Response({"error": "Note ID and content are required"}, status=400)

        notes = Note.objects.all()
        if not has_service_role(request):
            notes = notes.filter(user=request.user)
        if not str(note_id).isdigit() or not notes.filter(id=note_id).exists():
            return Response({"error": "Note not found"}, status=404)

        try:
            embed_note(int(note_id), content)
        except Exception as exc:
            logger.exception("Embed error")
            return Response({"error": str(exc) or "Failed to generate embedding"}, status=500)
        return Response({"success": True})


class SearchView(APIView):
    permission_classes = [IsAuthenticatedOrServiceRole]

    def post(self, request):
        query = request.data.get("query")
        user_id = request.data.get("userId")
        filters = request.data.get("filters")
        if not query or not user_id:
            return Response({"error": "Query and userId are required"}, status=400)
        if not str(user_id).isdigit():
            return Response({"error": "Invalid userId"}, status=400)
        if not _acts_for(request, user_id):
            return Response({"error": "You can only search your own notes"}, status=403)

        try:
            results = semantic_search(user_id, query, filters)
        except InvalidFilterError as exc:
            return Response({"error": str(exc)}, status=400)
        except Exception as exc:
            logger.exception("Search error")
            return Response({"error": str(exc) or "Failed to perform search"}, status=500)

        data = SearchResultSerializer(results, many=True).data
        return Response({"results": data, "count": len(data)})

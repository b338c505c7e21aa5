import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import DevJournalEntry
from .serializers import DevJournalEntrySerializer, JournalUpsertSerializer

logger = logging.getLogger(__name__)

RECENT_ENTRY_LIMIT = 30


class JournalView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            entries = DevJournalEntry.objects.filter(user=request.user).order_by("-date")[:RECENT_ENTRY_LIMIT]
            data = DevJournalEntrySerializer(entries, many=True).data
        except Exception as exc:
            logger.exception("Journal GET error")
            return Response({"error": str(exc) or "Failed to fetch journal entries"}, status=500)
        return Response({"entries": data})

    def post(self, request):
        if not request.data.get("date"):
            return Response({"error": "Date is required"}, status=400)

        serializer = JournalUpsertSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": "Invalid journal entry", "details": serializer.errors}, status=400)

        try:
            # One entry per user per day: a second save for the same date overwrites it.
            entry, _ = DevJournalEntry.objects.update_or_create(
                user=request.user,
                date=serializer.validated_data["date"],
                defaults=serializer.to_defaults(),
            )
        except Exception as exc:
            logger.exception("Journal POST error")
            return Response({"error": str(exc) or "Failed to save journal entry"}, status=500)
        return Response({"entry": DevJournalEntrySerializer(entry).data}, status=201)

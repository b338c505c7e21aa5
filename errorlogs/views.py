from rest_framework import generics
from rest_framework.permissions import IsAuthenticated

from core.permissions import IsOwner
from .models import ErrorLog
from .serializers import ErrorLogSerializer


class ErrorLogListView(generics.ListAPIView):
    serializer_class = ErrorLogSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return ErrorLog.objects.filter(user=self.request.user).order_by("-created_at")


class ErrorLogDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Read, resolve/unresolve or delete one analysed error."""
    serializer_class = ErrorLogSerializer
    permission_classes = [IsAuthenticated, IsOwner]

    def get_queryset(self):
        return ErrorLog.objects.filter(user=self.request.user)

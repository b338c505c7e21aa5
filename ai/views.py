import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from errorlogs.models import ErrorLog
from notes.models import Note
from . import services
from .prompts import MissingInputError

logger = logging.getLogger(__name__)


def _failure(exc, message):
    logger.exception(message)
    return Response({"error": str(exc) or message}, status=500)


def _run(message, func, *args):
    try:
        result = func(*args)
    except MissingInputError as exc:
        return Response({"error": str(exc)}, status=400)
    except Exception as exc:
        return _failure(exc, message)
    return Response(result)


class SummarizeView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return _run("Failed to summarize note", services.summarize, request.data.get("content"))


class RewriteView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return _run(
            "Failed to rewrite note",
            services.rewrite,
            request.data.get("content"),
            request.data.get("instruction"),
        )


class TagView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        content = request.data.get("content")
        if not content or not str(content).strip():
            return Response({"error": "Content is required"}, status=400)
        try:
            tags = services.generate_tags(content)
        except Exception as exc:
            return _failure(exc, "Failed to generate tags")
        return Response({"tags": tags})


class ExplainView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return _run(
            "Failed to explain code",
            services.explain_code,
            request.data.get("code"),
            request.data.get("language"),
            request.data.get("context"),
        )


class RefactorView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return _run(
            "Failed to refactor code",
            services.refactor_code,
            request.data.get("code"),
            request.data.get("language"),
            request.data.get("instruction"),
        )


class CommitMessageView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return _run(
            "Failed to generate commit message",
            services.commit_message,
            request.data.get("diff"),
            request.data.get("style"),
        )


class ErrorInsightView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        error_text = request.data.get("errorText")
        context = request.data.get("context")
        user_id = request.data.get("userId")
        note_id = request.data.get("noteId")

        try:
            result = services.error_insight(error_text, context)
            # Only keep a record when the caller asks for it on their own account.
            if user_id is not None and str(user_id) == str(request.user.id):
                note = None
                if note_id and str(note_id).isdigit():
                    note = Note.objects.filter(id=note_id, user=request.user).first()
                ErrorLog.objects.create(
                    user=request.user,
                    note=note,
                    error_text=error_text,
                    language=result["detectedLanguage"][:50],
                    framework=result["detectedFramework"][:50] or None,
                    ai_explanation=result["explanation"],
                    ai_solution=result["solutions"],
                    is_resolved=False,
                )
        except MissingInputError as exc:
            return Response({"error": str(exc)}, status=400)
        except Exception as exc:
            return _failure(exc, "Failed to analyze error")
        return Response(result)

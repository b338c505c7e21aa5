import logging

from django.db import DatabaseError
from django.db.models import F

from .models import Snippet

logger = logging.getLogger(__name__)


def increment_usage(snippet_id, user):
    """
    Bump a snippet's copy counter. Returns False if the user has no such snippet.

    The counter is updated atomically in the database. If that update fails the
    counter is read and written back instead, which can lose counts when the
    same snippet is copied concurrently.
    """
    snippets = Snippet.objects.filter(id=snippet_id, user=user)
    try:
        return snippets.update(usage_count=F("usage_count") + 1) > 0
    except DatabaseError:
        logger.warning("Atomic usage increment failed for snippet %s, falling back", snippet_id)

    snippet = snippets.first()
    if snippet is None:
        return False
    snippet.usage_count = (snippet.usage_count or 0) + 1
    snippet.save(update_fields=["usage_count"])
    return True

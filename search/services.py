import logging
import threading
from datetime import datetime, time, timezone as dt_timezone

from django.conf import settings
from django.db import connections
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from ai import gateway
from .models import AIMetadata

logger = logging.getLogger(__name__)

MATCH_THRESHOLD = 0.7
MATCH_COUNT = 10


class InvalidFilterError(ValueError):
    pass


def content_changed(previous, current):
    current = (current or "").strip()
    return bool(current) and current != (previous or "").strip()


def embed_note(note_id, content):
    vector = gateway.embed(content)
    metadata, _ = AIMetadata.objects.update_or_create(note_id=note_id, defaults={"embedding": vector})
    return metadata


def _embed_quietly(note_id, content):
    try:
        embed_note(note_id, content)
    except Exception:
        logger.exception("Embedding refresh failed for note %s", note_id)


def _embed_in_thread(note_id, content):
    try:
        _embed_quietly(note_id, content)
    finally:
        connections.close_all()


def schedule_note_embedding(note_id, content):
    """Refresh a note's embedding without holding up the save that triggered it."""
    if getattr(settings, "NOTIQ_EMBED_IN_BACKGROUND", True):
        threading.Thread(target=_embed_in_thread, args=(note_id, content), daemon=True).start()
    else:
        _embed_quietly(note_id, content)


def parse_bound(value, name, end_of_day=False):
    """Parse an ISO date or datetime filter. Bare dates cover the whole day."""
    if not value:
        return None
    text = str(value).strip()
    # A bare date has to be recognised first: parse_datetime also accepts one
    # on newer interpreters and would pin it to midnight.
    try:
        day = parse_date(text)
        parsed = None if day else parse_datetime(text)
    except ValueError:
        raise InvalidFilterError(f"Invalid {name}")
    if day is not None:
        parsed = datetime.combine(day, time.max if end_of_day else time.min)
    elif parsed is None:
        raise InvalidFilterError(f"Invalid {name}")
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def parse_filters(filters):
    filters = filters if isinstance(filters, dict) else {}
    tags = filters.get("tags") or []
    if not isinstance(tags, list):
        tags = [tags]
    return {
        "tags": [str(tag) for tag in tags],
        "date_from": parse_bound(filters.get("dateFrom"), "dateFrom"),
        "date_to": parse_bound(filters.get("dateTo"), "dateTo", end_of_day=True),
    }


def apply_filters(notes, tags=None, date_from=None, date_to=None):
    """Narrow search results in memory. Order is never changed."""
    if tags:
        notes = [note for note in notes if note.tags and any(tag in note.tags for tag in tags)]
    if date_from:
        notes = [note for note in notes if note.created_at >= date_from]
    if date_to:
        notes = [note for note in notes if note.created_at <= date_to]
    return notes


def semantic_search(user_id, query, filters=None):
    parsed = parse_filters(filters)
    vector = gateway.embed(query)
    matches = AIMetadata.objects.search_notes_semantic(
        user_id,
        vector,
        match_threshold=MATCH_THRESHOLD,
        match_count=MATCH_COUNT,
    )
    return apply_filters(matches, **parsed)

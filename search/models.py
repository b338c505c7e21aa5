import numpy as np
from django.db import models

from notes.models import Note


def cosine_similarities(query, vectors):
    """Cosine similarity of ``query`` against each row of ``vectors``. Zero vectors score 0."""
    matrix = np.asarray(vectors, dtype=np.float64)
    query = np.asarray(query, dtype=np.float64)
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    return np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)


def cosine_similarity(a, b):
    if not a or not b or len(a) != len(b):
        return 0.0
    return float(cosine_similarities(a, [b])[0])


class AIMetadataQuerySet(models.QuerySet):
    def search_notes_semantic(self, user_id, query_embedding, match_threshold=0.7, match_count=10):
        """
        Nearest notes for one user, most similar first.

        Only notes whose cosine similarity is strictly above ``match_threshold``
        are returned, at most ``match_count`` of them. Each returned note carries
        a ``similarity`` attribute. Stored vectors of another dimension are skipped.
        """
        if not query_embedding:
            return []
        dimension = len(query_embedding)
        rows = [
            row
            for row in self.filter(note__user_id=user_id, embedding__isnull=False).select_related("note")
            if isinstance(row.embedding, list) and len(row.embedding) == dimension
        ]
        if not rows:
            return []

        scores = cosine_similarities(query_embedding, [row.embedding for row in rows])
        matches = []
        for index in np.argsort(-scores, kind="stable"):
            if scores[index] <= match_threshold or len(matches) == match_count:
                break
            note = rows[index].note
            note.similarity = float(scores[index])
            matches.append(note)
        return matches


class AIMetadata(models.Model):
    note = models.OneToOneField(Note, primary_key=True, on_delete=models.CASCADE, related_name="ai_metadata")
    embedding = models.JSONField(null=True, blank=True)
    sentiment = models.CharField(max_length=32, null=True, blank=True)
    keywords = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AIMetadataQuerySet.as_manager()

    class Meta:
        verbose_name_plural = "AI metadata"

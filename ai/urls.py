from django.urls import path
from .views import (
    SummarizeView,
    RewriteView,
    TagView,
    ExplainView,
    RefactorView,
    CommitMessageView,
    ErrorInsightView,
)

urlpatterns = [
    path("summarize/", SummarizeView.as_view(), name="ai-summarize"),
    path("rewrite/", RewriteView.as_view(), name="ai-rewrite"),
    path("tag/", TagView.as_view(), name="ai-tag"),
    path("ai/explain/", ExplainView.as_view(), name="ai-explain"),
    path("ai/refactor/", RefactorView.as_view(), name="ai-refactor"),
    path("ai/commit/", CommitMessageView.as_view(), name="ai-commit"),
    path("ai/error-insight/", ErrorInsightView.as_view(), name="ai-error-insight"),
]

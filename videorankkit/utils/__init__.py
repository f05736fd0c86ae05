from .duration import parse_duration, is_compact_duration
from .shorts import has_short_form_keyword, is_short_duration, classify_short_form
from .scoring import compute_score, recency_score, views_score, subscribers_score
from .stage import StageResult, run_stage

__all__ = [
    "parse_duration",
    "is_compact_duration",
    "has_short_form_keyword",
    "is_short_duration",
    "classify_short_form",
    "compute_score",
    "recency_score",
    "views_score",
    "subscribers_score",
    "StageResult",
    "run_stage",
]

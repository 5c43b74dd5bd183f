from __future__ import annotations

from inlining_log.core.decision_log import InliningLog
from inlining_log.core.report import generate_inlining_report
from inlining_log.domain.decision_models import CallsiteNode, Decision
from inlining_log.domain.errors import InliningLogError, MissingPositionError
from inlining_log.domain.positions import PositionChain, SourceLocation

__all__ = [
    "CallsiteNode",
    "Decision",
    "InliningLog",
    "InliningLogError",
    "MissingPositionError",
    "PositionChain",
    "SourceLocation",
    "generate_inlining_report",
]

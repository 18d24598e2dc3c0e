from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Protocol

from ..analysis.report import analyze
from ..models.analysis_result import AnalysisResult
from ..models.config_models import PipelineConfig
from ..models.field_types import FieldTypeMap, Table
from ..models.processing_result import PipelineResult
from .pipeline_runner import run_pipeline

"""Session store and the upload -> clean -> analyze flow built on it.

A Session is the only stateful object around the pipeline. It is owned by the
caller through a SessionStore; the pipeline functions never see the store.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "Session",
    "SessionStore",
    "InMemorySessionStore",
    "SessionNotFoundError",
    "SessionService",
]

PREVIEW_ROWS = 5


class SessionNotFoundError(KeyError):
    pass


@dataclass(frozen=True)
class Session:
    """State of one upload as it moves through cleaning and analysis."""
    session_id: str
    original: Table
    field_types: FieldTypeMap = field(default_factory=dict)
    cleaned: Table | None = None
    analysis: AnalysisResult | None = None

    def preview(self, rows: int = PREVIEW_ROWS) -> Table:
        source = self.cleaned if self.cleaned is not None else self.original
        return source[:rows]


class SessionStore(Protocol):
    def create(self, table: Table) -> Session: ...

    def get(self, session_id: str) -> Session: ...

    def update(self, session: Session) -> Session: ...


class InMemorySessionStore:
    """Dict-backed SessionStore keyed by a random UUID4 string."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def create(self, table: Table) -> Session:
        session = Session(session_id=str(uuid.uuid4()), original=[dict(r) for r in table])
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Session:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def update(self, session: Session) -> Session:
        if session.session_id not in self._sessions:
            raise SessionNotFoundError(session.session_id)
        self._sessions[session.session_id] = session
        return session

    def __len__(self) -> int:
        return len(self._sessions)


class SessionService:
    """Boundary layer: stores uploads, runs the pipeline, runs analysis."""

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def upload(self, table: Table) -> Session:
        session = self.store.create(table)
        logger.info(f"session={session.session_id} uploaded rows={len(table)}")
        return session

    def clean(
        self, session_id: str, config: PipelineConfig | None = None, *, today: date | None = None
    ) -> PipelineResult:
        session = self.store.get(session_id)
        result = run_pipeline(session.original, config, today=today, source=session_id)
        self.store.update(replace(session, field_types=result.field_types, cleaned=result.rows))
        return result

    def analyze(self, session_id: str, field: str, chart_type: str, z_threshold: float = 3.0) -> AnalysisResult:
        """Analyze the cleaned table of a session (the original one if not cleaned yet)."""
        session = self.store.get(session_id)
        table = session.cleaned if session.cleaned is not None else session.original
        result = analyze(table, field, chart_type, z_threshold)
        self.store.update(replace(session, analysis=result))
        return result

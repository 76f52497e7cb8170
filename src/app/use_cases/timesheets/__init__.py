"""Casos de uso em lote sobre apontamentos."""

from app.use_cases.timesheets.replicate_timesheets import ReplicateTimesheetsUseCase

__all__ = ["ReplicateTimesheetsUseCase"]

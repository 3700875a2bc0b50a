"""Aggregate counts returned by the stats endpoint."""

from pydantic import BaseModel


class LibraryStats(BaseModel):
    total: int
    completed: int
    in_progress: int
    not_started: int

"""Tests for schema creation and seeding at application startup."""

from __future__ import annotations

from fastapi.testclient import TestClient

from book_catalog import main
from book_catalog.models.book import Book


def test_lifespan_seeds_empty_catalog(monkeypatch, session_factory) -> None:
    monkeypatch.setattr(main, "init_db", lambda: None)
    monkeypatch.setattr(main, "SessionLocal", session_factory)

    with TestClient(main.app) as client:
        stats = client.get("/api/stats").json()

    assert stats["total"] == 5
    assert stats["not_started"] == 5


def test_prepare_store_skips_seeding_when_disabled(monkeypatch, session_factory) -> None:
    calls: list[str] = []
    monkeypatch.setattr(main, "init_db", lambda: calls.append("init"))
    monkeypatch.setattr(main, "SessionLocal", session_factory)
    monkeypatch.setattr(main.settings, "seed_sample_data", False)

    main.prepare_store()

    assert calls == ["init"]
    with session_factory() as session:
        assert session.query(Book).count() == 0

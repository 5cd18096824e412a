"""레포지토리 패키지 — 기록 저장소 계층.

Repository package — Record store layer.
``RecordRepository`` is the storage interface the services depend on. It has
an in-memory adapter (fixtures, tests) and a SQLAlchemy adapter (production);
both hand back Pydantic record schemas so the filter engine and the
aggregator never see ORM rows.
"""

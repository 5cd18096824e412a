"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
``filter_service`` and the aggregation functions in ``report_service`` are
pure and synchronous; the service classes load collections through a
``RecordRepository`` and hand them to those functions.
"""

"""금액/할인율 표시 형식 유틸리티.

Currency and discount formatting helpers.
Amounts and rates are stored as Decimal; strings such as "R$ 2474.98" or
"10%" are produced only here, at the response boundary.
"""

from decimal import ROUND_HALF_UP, Decimal

CENTS: Decimal = Decimal("0.01")
# 할인율 정밀도: Numeric(5, 4) 컬럼과 동일 (0.2833 = 28.33%)
RATE_PLACES: Decimal = Decimal("0.0001")


def money(value: Decimal | int | str) -> Decimal:
    """금액을 소수점 2자리로 반올림 — Quantize to two fractional digits (half up)."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """``Decimal("2474.98")`` -> ``"R$ 2474.98"``."""
    return f"{symbol} {money(value):f}"


def format_percent(rate: Decimal) -> str:
    """할인율(분수)을 퍼센트 문자열로 — ``Decimal("0.1")`` -> ``"10%"``.

    Two fractional digits at most, trailing zeros dropped ("28.33%", "25%").
    """
    pct: Decimal = (Decimal(rate) * 100).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{pct.normalize():f}%"


def percent_to_rate(percent: Decimal | int | str) -> Decimal:
    """퍼센트 값을 분수로 — ``25`` -> ``Decimal("0.25")``; accepts ``"25%"``."""
    if isinstance(percent, str):
        percent = percent.strip().rstrip("%").strip()
    return Decimal(percent) / 100

from __future__ import annotations

from risk_desk.domain.value_objects.charges import BrokerageRates, ChargesBreakdown
from risk_desk.domain.value_objects.money import round_half_away
from risk_desk.infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_RATES = BrokerageRates()


def compute_fee_breakdown(
    buy_price: float,
    shares: float,
    rates: BrokerageRates | None = None,
) -> ChargesBreakdown:
    """
    Buy-side charges for a delivery equity trade.

    Every component is rounded half away from zero to 2 decimals as it is
    computed. GST is levied on the rounded exchange and SEBI charges, and the
    total is the sum of the rounded components, so it never drifts from what
    is displayed. Non-positive inputs yield zero or negative figures rather
    than an error.
    """
    rates = rates or DEFAULT_RATES
    turnover = buy_price * shares

    stt = round_half_away(rates.stt * turnover)
    transaction_charges = round_half_away(rates.transaction_charges * turnover)
    sebi_charges = round_half_away(rates.sebi_charges * turnover)
    gst = round_half_away(rates.gst * (transaction_charges + sebi_charges))
    stamp_duty = round_half_away(rates.stamp_duty * turnover)
    total_charges = round_half_away(stt + transaction_charges + sebi_charges + gst + stamp_duty)

    logger.debug(
        "Charges computed",
        extra={"turnover": turnover, "total_charges": total_charges},
    )
    return ChargesBreakdown(
        stt=stt,
        transaction_charges=transaction_charges,
        sebi_charges=sebi_charges,
        gst=gst,
        stamp_duty=stamp_duty,
        total_charges=total_charges,
    )

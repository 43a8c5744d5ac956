"""Build simulator inputs from stored debts and the payments made on them.

A stored debt records the original amount borrowed. Payments tagged with the
debt's id reduce what is still owed; fully repaid debts are left out so the
simulator only ever sees open debts.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from pydantic import BaseModel, Field

from projection_engine.core.logging import get_logger
from projection_engine.domain.models.debt import Debt

log = get_logger(__name__)


class DebtRecord(BaseModel):
    """Debt as stored by the budgeting application."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0, description="Original amount owed")
    annual_interest_rate: float = Field(default=0.0, ge=0)
    minimum_payment: float = Field(..., gt=0)


class DebtPayment(BaseModel):
    """Budget expense recorded against a debt."""

    debt_id: str
    amount: float


def prepare_debt_snapshots(
    records: Iterable[DebtRecord],
    payments: Iterable[DebtPayment] = (),
) -> list[Debt]:
    """Net each debt against its payments and keep the ones still open.

    Args:
        records: Stored debts
        payments: Expenses tagged with a debt id; unknown ids are ignored

    Returns:
        Open debts in record order, ready for ``simulate_payoff``
    """
    paid: dict[str, float] = defaultdict(float)
    for payment in payments:
        paid[payment.debt_id] += payment.amount

    snapshots = []
    for record in records:
        remaining = record.total_amount - paid.get(record.id, 0.0)
        if remaining <= 0:
            log.debug("debt_already_repaid", debt_id=record.id, name=record.name)
            continue
        snapshots.append(Debt(
            name=record.name,
            balance=remaining,
            annual_interest_rate=record.annual_interest_rate,
            minimum_payment=record.minimum_payment,
        ))

    log.debug("debt_snapshots_prepared", debts_with_payments=len(paid), open_debts=len(snapshots))
    return snapshots

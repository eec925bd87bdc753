"""Turns card and loan records into engine Debts."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from payoff.config import settings
from payoff.models.debt import Debt

if TYPE_CHECKING:
    from payoff.models.accounts import CreditCard, Loan


def card_min_payment(card: CreditCard) -> float:
    """Installment amount while a plan is active, else a share of the balance."""
    if card.has_installment_plan:
        return card.installment_amount
    return card.balance * settings.CARD_MIN_PAYMENT_RATE


def normalize_card(card: CreditCard) -> Debt:
    rate = card.rate if card.rate and card.rate > 0 else settings.DEFAULT_CARD_RATE
    return Debt(
        name=card.name,
        balance=card.balance,
        annual_rate=rate,
        min_payment=card_min_payment(card),
        due_date=card.due_date,
    )


def normalize_loan(loan: Loan) -> Debt:
    return Debt(
        name=loan.name,
        balance=loan.principal,
        annual_rate=loan.rate or 0.0,
        min_payment=loan.monthly_payment or 0.0,
        due_date=loan.due_date,
    )


def normalize_debts(
    cards: Iterable[CreditCard] = (),
    loans: Iterable[Loan] = (),
) -> list[Debt]:
    """Build a fresh Debt snapshot: cards first, then loans."""
    debts = [normalize_card(card) for card in cards]
    debts.extend(normalize_loan(loan) for loan in loans)
    return debts

"""Data model for tax templates, applications and ledger entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TaxCalculationType(str, Enum):
    """How a single tax application computes its amount."""

    PERCENT = "Percent"
    FIXED = "Fixed"


class TaxApplyOn(str, Enum):
    """The value a percentage application is computed from."""

    REFERENCE_VALUE = "Reference Value"
    RUNNING_GROSS = "Running Gross"
    PREVIOUS_TAX = "Previous Tax Amount"


@dataclass(frozen=True)
class Application:
    """One step of a tax template: a percentage or a fixed amount in cents."""

    app_type: TaxCalculationType | None = None
    fixed_amount: int = 0
    percent: float = 0.0
    apply_on: TaxApplyOn | None = None


@dataclass
class TaxApplicationTemplate:
    """A set of tax rules applied in order to a value."""

    template_id: str = ""
    applications: list[Application] = field(default_factory=list)


@dataclass(frozen=True)
class LedgerEntry:
    """A single ledger line; amounts are in cents."""

    account: str
    debit: int = 0
    credit: int = 0
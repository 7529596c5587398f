"""Tax calculation and invoice posting; all money amounts are integer cents."""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field

from .model import (
    LedgerEntry,
    TaxApplicationTemplate,
    TaxApplyOn,
    TaxCalculationType,
)

logger = logging.getLogger(__name__)


class TaxError(ValueError):
    """Raised when a tax cannot be calculated."""


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def percent(amount: int, rate: float) -> int:
    """Apply ``rate`` percent to ``amount`` cents, rounding half up in integer math.

    The rate is truncated to two decimal places before use.
    """
    truncated_rate = math.trunc(rate * 100) / 100
    basis_points = _round_half_away(truncated_rate * 100)
    return _div_trunc(amount * basis_points + 5000, 10000)


def tax_calculate(base_amount: int, template: TaxApplicationTemplate) -> int:
    """Return the total tax produced by applying ``template`` to ``base_amount``."""
    if base_amount < 0:
        raise TaxError(
            "validation error: Cannot calculate Tax for '0' or 'Negative' "
            "dollars as base amount"
        )

    running_gross = base_amount
    previous_tax = 0

    for app in template.applications:
        if not app.app_type:
            raise TaxError("application type not defined on template")

        if app.app_type == TaxCalculationType.PERCENT:
            if app.apply_on == TaxApplyOn.REFERENCE_VALUE:
                source = base_amount
            elif app.apply_on == TaxApplyOn.PREVIOUS_TAX:
                source = previous_tax
            elif app.apply_on == TaxApplyOn.RUNNING_GROSS:
                source = running_gross
            else:
                continue
            tax = percent(source, app.percent)
            previous_tax = tax
            running_gross += tax
        elif app.app_type == TaxCalculationType.FIXED:
            running_gross += app.fixed_amount
        else:
            raise TaxError("validation error: Invalid Application Type")

    return running_gross - base_amount


def calculate_with_inclusive_base(
    inclusive_base: int, template: TaxApplicationTemplate
) -> tuple[int, int]:
    """Split a tax-inclusive amount into ``(exclusive_base, tax)``.

    The exclusive base is found by iterative estimation; any remaining
    one-cent rounding difference is absorbed into the tax.
    """
    if inclusive_base <= 0:
        raise TaxError(
            "validation error: Cannot calculate Tax for '0' or 'Negative' "
            "dollars as inclusive of tax amount"
        )

    total_rate = sum(
        app.percent
        for app in template.applications
        if app.app_type == TaxCalculationType.PERCENT
    )
    total_fixed = sum(
        app.fixed_amount
        for app in template.applications
        if app.app_type == TaxCalculationType.FIXED
    )

    estimate = (
        inclusive_base
        - percent(inclusive_base - total_fixed, total_rate)
        - total_fixed
    )
    logger.debug("First exclusive estimate: %s", estimate)

    while True:
        calculated_tax = tax_calculate(estimate, template)
        diff = estimate + calculated_tax - inclusive_base
        logger.debug("Diff: %s", diff)
        tax_estimate = calculated_tax

        if -1 <= diff <= 1:
            final_guess = estimate - diff
            try:
                final_tax = tax_calculate(final_guess, template)
            except TaxError as err:
                raise TaxError(f"final Tax Calculation failed: {err}") from err
            if final_guess + final_tax == inclusive_base:
                estimate = final_guess
                tax_estimate = final_tax
                diff = 0
            break

        estimate -= diff

    return estimate, tax_estimate - diff


@dataclass
class LineItem:
    """An invoice line; ``amount`` is in cents, tax-inclusive when ``inclusive``."""

    amount: int
    template: TaxApplicationTemplate
    inclusive: bool = False
    item_name: str = ""

    def process(self) -> tuple[int, list[LedgerEntry]]:
        """Return the tax on ``amount`` and the ledger entries that post it."""
        tax = tax_calculate(self.amount, self.template)
        entries = [
            LedgerEntry("Tax Asset", debit=tax),
            LedgerEntry("Supplier", credit=self.amount + tax),
            LedgerEntry("Inventory", debit=self.amount),
        ]
        return tax, entries


@dataclass
class Invoice:
    """A collection of line items."""

    items: list[LineItem] = field(default_factory=list)

    def process(self) -> tuple[int, int, list[LedgerEntry]]:
        """Return ``(inventory_cost, tax, ledger_entries)`` for the whole invoice.

        Line items are not modified; inclusive amounts are converted to their
        exclusive base before posting.
        """
        cost = 0
        tax = 0
        entries: list[LedgerEntry] = []

        for item in self.items:
            if item.inclusive:
                exclusive_base, _ = calculate_with_inclusive_base(
                    item.amount, item.template
                )
                item = dataclasses.replace(item, amount=exclusive_base)

            item_tax, item_entries = item.process()
            cost += item.amount
            tax += item_tax
            entries.extend(item_entries)

        return cost, tax, entries


def print_money(amount: int) -> str:
    """Format an amount in cents with a decimal point before the last two digits."""
    digits = str(amount)
    if len(digits) == 1:
        return "0.0" + digits
    if len(digits) == 2:
        return "0." + digits
    return digits[:-2] + "." + digits[-2:]
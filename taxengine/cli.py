"""Command that posts a demonstration invoice and prints its trial balance."""

from __future__ import annotations

import argparse
import sys

from .engine import Invoice, LineItem, TaxError, print_money
from .model import (
    Application,
    TaxApplicationTemplate,
    TaxApplyOn,
    TaxCalculationType,
)


def build_demo_invoice() -> Invoice:
    """Return an invoice with one exclusive and one tax-inclusive line item."""
    simple = TaxApplicationTemplate(
        "Simple",
        [
            Application(
                TaxCalculationType.PERCENT,
                percent=10.0,
                apply_on=TaxApplyOn.REFERENCE_VALUE,
            ),
        ],
    )
    complex_template = TaxApplicationTemplate(
        "Complex",
        [
            Application(
                TaxCalculationType.PERCENT,
                percent=10.0,
                apply_on=TaxApplyOn.REFERENCE_VALUE,
            ),
            Application(TaxCalculationType.FIXED, fixed_amount=2600),
            Application(
                TaxCalculationType.PERCENT,
                percent=10,
                apply_on=TaxApplyOn.RUNNING_GROSS,
            ),
        ],
    )
    return Invoice(
        [
            LineItem(10000, simple, inclusive=False),
            LineItem(22000, complex_template, inclusive=True),
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Process the demonstration invoice and print totals and ledger entries."""
    parser = argparse.ArgumentParser(
        description="Post a demonstration invoice and print its trial balance."
    )
    parser.parse_args(argv)

    try:
        cost, tax, entries = build_demo_invoice().process()
    except TaxError as err:
        print(err, file=sys.stderr)
        return 1

    print(f"\n\nTotal Inventory Cost: {print_money(cost)}")
    print(f"Total Tax Amount: {print_money(tax)}")

    print("\nLedger Entries:")
    for entry in entries:
        print(
            f"Account: {entry.account}, \tDebit: {print_money(entry.debit)}, "
            f"\tCredit: {print_money(entry.credit)}"
        )

    total_debits = sum(entry.debit for entry in entries)
    total_credits = sum(entry.credit for entry in entries)
    print(f"\n\tTotal Debits:\t{print_money(total_debits)}")
    print(f"\tTotal Credits:\t{print_money(total_credits)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
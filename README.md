# taxengine

A small tax engine that keeps every amount in integer cents. It applies an
ordered list of tax rules to an amount. It works back from a tax-inclusive
price to the tax-exclusive base. It also produces double-entry ledger
entries for an invoice.

## Concepts

All of these live in `taxengine.model`. `LineItem` and `Invoice` live in
`taxengine.engine`.

- **`Application`**: one tax rule. Its `app_type` is a `TaxCalculationType`:
  - `PERCENT` rules use `percent` and an `apply_on` target of type
    `TaxApplyOn`:
    - `REFERENCE_VALUE`: the original base amount,
    - `PREVIOUS_TAX`: the tax produced by the previous percentage rule,
    - `RUNNING_GROSS`: the base plus all tax so far.

    A percentage rule with no recognised `apply_on` is skipped.
  - `FIXED` rules add `fixed_amount` cents.
- **`TaxApplicationTemplate`**: a `template_id` and an ordered list of
  `applications`.
- **`LedgerEntry`**: an `account` name with a `debit` and a `credit` in
  cents.
- **`LineItem`**: an `amount`, a `template`, an `inclusive` flag that says
  whether the amount already contains tax, and an optional `item_name`.
- **`Invoice`**: a list of `items`.

`percent(amount, rate)` first cuts the rate to two decimal places. It then
applies the rate in integer arithmetic and rounds half up.

## Usage

```python
from taxengine.model import (
    Application,
    TaxApplicationTemplate,
    TaxApplyOn,
    TaxCalculationType,
)
from taxengine.engine import (
    Invoice,
    LineItem,
    calculate_with_inclusive_base,
    print_money,
    tax_calculate,
)

template = TaxApplicationTemplate(
    template_id="Simple",
    applications=[
        Application(
            app_type=TaxCalculationType.PERCENT,
            percent=10.0,
            apply_on=TaxApplyOn.REFERENCE_VALUE,
        ),
    ],
)

tax_calculate(10000, template)                 # 1000
calculate_with_inclusive_base(11000, template) # (10000, 1000)
print_money(12345)                             # "123.45"

invoice = Invoice(items=[LineItem(amount=10000, template=template)])
cost, tax, entries = invoice.process()
```

- `tax_calculate(base_amount, template)` returns the total tax that the
  template adds to the base.
- `calculate_with_inclusive_base(inclusive_base, template)` returns
  `(exclusive_base, tax)`. It finds the base by iterative estimation. Any
  remaining one-cent rounding difference goes into the tax.
- `LineItem.process()` returns the tax on the item's amount and three
  entries:
  - a *Tax Asset* debit,
  - a *Supplier* credit of amount plus tax,
  - an *Inventory* debit.
- `Invoice.process()` returns `(inventory_cost, tax, entries)` for the whole
  invoice. It first converts inclusive items to their exclusive base. It
  does not change the line items themselves.
- `print_money(amount)` formats cents with a decimal point before the last
  two digits.

`TaxError` (a `ValueError`) is raised in these cases:

- a negative base amount,
- a zero or negative inclusive amount,
- an application with no type or an unknown type.

Intermediate steps of the inclusive calculation are logged at debug level
on the `taxengine.engine` logger.

## Demo

Install the package, then run:

```
taxengine-demo
```

It can also be run as `python -m taxengine.cli`. The demo processes a
built-in invoice with two line items:

- a tax-exclusive item under a simple 10 % rule,
- a tax-inclusive item under a compound template (10 %, a fixed 26.00, then
  10 % on the running gross).

It prints:

- the total inventory cost,
- the total tax,
- every ledger entry,
- the total debits and credits.

## What it does not do

The package does not read invoices or templates from files or other input.
It does not store ledger entries anywhere either. The only command runs the
built-in demonstration invoice. To work with other data, build the objects
in Python and call the functions above.

## Tests

```
pip install -e ".[test]"
pytest
```
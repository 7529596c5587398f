from taxengine.cli import build_demo_invoice, main
from taxengine.engine import print_money


def _run(capsys):
    code = main([])
    return code, capsys.readouterr().out.splitlines()


def _value_after(lines, label):
    for line in lines:
        if line.strip().startswith(label):
            return line.split("\t")[-1] if "\t" in line else line.split(": ")[-1]
    raise AssertionError(f"{label} not found")


def test_demo_invoice_items():
    invoice = build_demo_invoice()
    assert [item.amount for item in invoice.items] == [10000, 22000]
    assert [item.inclusive for item in invoice.items] == [False, True]
    assert [item.template.template_id for item in invoice.items] == ["Simple", "Complex"]


def test_demo_invoice_complex_template_has_fixed_amount():
    complex_template = build_demo_invoice().items[1].template
    assert [app.fixed_amount for app in complex_template.applications] == [0, 2600, 0]


def test_main_exit_code(capsys):
    code, _ = _run(capsys)
    assert code == 0


def test_main_prints_totals_matching_engine(capsys):
    cost, tax, _ = build_demo_invoice().process()
    _, lines = _run(capsys)
    assert _value_after(lines, "Total Inventory Cost:") == print_money(cost)
    assert _value_after(lines, "Total Tax Amount:") == print_money(tax)


def test_main_prints_every_entry(capsys):
    _, _, entries = build_demo_invoice().process()
    _, lines = _run(capsys)
    account_lines = [line for line in lines if line.startswith("Account: ")]
    assert len(account_lines) == len(entries)
    assert account_lines[0].startswith("Account: Tax Asset,")


def test_main_trial_balance_balances(capsys):
    _, lines = _run(capsys)
    debits = _value_after(lines, "Total Debits:")
    credits = _value_after(lines, "Total Credits:")
    assert debits == credits


def test_demo_invoice_is_not_mutated_by_processing():
    invoice = build_demo_invoice()
    invoice.process()
    assert invoice.items[1].amount == 22000
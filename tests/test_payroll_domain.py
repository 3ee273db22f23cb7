"""Payroll money arithmetic and lifecycle tests."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from hr_api.exceptions import InvalidStateTransitionError, InvalidValueError
from hr_api.models.domain.payroll import (
    Deductions,
    GrossSalary,
    NetSalary,
    Payroll,
    PayrollPeriod,
    PayrollStatus,
)


def make_deductions(**overrides) -> Deductions:
    values = {
        "taxes": Decimal("1000"),
        "social_security": Decimal("300"),
        "health_insurance": Decimal("200"),
        "other_deductions": Decimal("0"),
    }
    values.update(overrides)
    return Deductions(**values)


def make_payroll(gross: str = "5000", deductions: Deductions | None = None) -> Payroll:
    return Payroll.create(
        employee_id=uuid4(),
        period=PayrollPeriod.for_month(2025, 1),
        gross_salary=GrossSalary(Decimal(gross)),
        deductions=deductions or make_deductions(),
    )


class TestPayrollPeriod:
    def test_for_month(self):
        period = PayrollPeriod.for_month(2024, 2)
        assert period.start_date == date(2024, 2, 1)
        assert period.end_date == date(2024, 2, 29)
        assert period.days_in_period == 28

    def test_for_month_rejects_invalid_month(self):
        with pytest.raises(InvalidValueError, match="Invalid month: 13"):
            PayrollPeriod.for_month(2024, 13)

    def test_biweekly_spans_fourteen_days(self):
        period = PayrollPeriod.biweekly(date(2025, 1, 6))
        assert period.end_date == date(2025, 1, 19)
        assert period.days_in_period == 13

    def test_end_must_follow_start(self):
        with pytest.raises(InvalidValueError, match="End date must be after start date"):
            PayrollPeriod(date(2025, 1, 31), date(2025, 1, 1))

    def test_longest_month_is_allowed(self):
        assert PayrollPeriod(date(2025, 1, 1), date(2025, 1, 31)).contains(date(2025, 1, 31))

    def test_cannot_exceed_31_days(self):
        with pytest.raises(InvalidValueError, match="cannot exceed 31 days"):
            PayrollPeriod(date(2025, 1, 1), date(2025, 2, 1))


class TestMoney:
    def test_gross_must_be_positive(self):
        with pytest.raises(InvalidValueError, match="Gross salary amount must be positive"):
            GrossSalary(Decimal("0"))

    def test_net_must_be_positive(self):
        with pytest.raises(InvalidValueError, match="Net salary amount must be positive"):
            NetSalary(Decimal("-5"))

    def test_unsupported_currency(self):
        with pytest.raises(InvalidValueError, match="Invalid currency code: XYZ"):
            GrossSalary(Decimal("100"), "XYZ")

    def test_gross_arithmetic(self):
        gross = GrossSalary(Decimal("1000"))
        assert gross.add(GrossSalary(Decimal("250.50"))).amount == Decimal("1250.50")
        assert gross.subtract(GrossSalary(Decimal("400"))).amount == Decimal("600.00")
        assert gross.multiply(Decimal("1.5")).amount == Decimal("1500.00")
        assert gross.format() == "1000.00 USD"

    def test_multiplier_must_be_positive(self):
        with pytest.raises(InvalidValueError, match="Multiplier must be positive"):
            GrossSalary(Decimal("1000")).multiply(0)

    def test_cross_currency_arithmetic_is_refused(self):
        with pytest.raises(InvalidValueError, match="Cannot add different currencies: USD and EUR"):
            GrossSalary(Decimal("1"), "USD").add(GrossSalary(Decimal("1"), "EUR"))
        with pytest.raises(InvalidValueError, match="Cannot compare different currencies"):
            GrossSalary(Decimal("1"), "USD").is_less_than(GrossSalary(Decimal("1"), "EUR"))

    @pytest.mark.parametrize(
        "field,label",
        [
            ("taxes", "Taxes"),
            ("social_security", "Social security"),
            ("health_insurance", "Health insurance"),
            ("other_deductions", "Other deductions"),
        ],
    )
    def test_deductions_cannot_be_negative(self, field, label):
        with pytest.raises(InvalidValueError, match=f"{label} cannot be negative"):
            make_deductions(**{field: Decimal("-0.01")})

    def test_deductions_total_and_percentage(self):
        deductions = make_deductions(other_deductions=Decimal("100"))
        assert deductions.total == Decimal("1600.00")
        assert deductions.percentage_of(Decimal("5000")) == Decimal("32")

    def test_deductions_add(self):
        total = make_deductions().add(make_deductions())
        assert total.taxes == Decimal("2000.00")
        assert total.total == Decimal("3000.00")

    def test_deductions_format(self):
        assert make_deductions().format() == (
            "Taxes: 1000.00 USD, Social Security: 300.00 USD, Health Insurance: 200.00 USD, "
            "Other: 0.00 USD, Total: 1500.00 USD"
        )


class TestPayrollLifecycle:
    def test_net_salary_is_gross_minus_deductions(self):
        payroll = make_payroll()
        assert payroll.status == PayrollStatus.PENDING
        assert payroll.net_salary.amount == Decimal("3500.00")

    def test_deductions_equal_to_gross_are_refused(self):
        with pytest.raises(InvalidValueError, match="Net salary amount must be positive"):
            make_payroll(gross="1500")

    def test_deductions_in_other_currency_are_refused(self):
        with pytest.raises(InvalidValueError, match="different currencies"):
            make_payroll(deductions=Deductions(Decimal("1"), Decimal("1"), Decimal("1"), currency="EUR"))

    def test_process_then_pay(self):
        payroll = make_payroll()
        payroll.process()
        assert payroll.status == PayrollStatus.PROCESSED
        assert payroll.processed_at is not None
        payroll.pay()
        assert payroll.status == PayrollStatus.PAID
        assert payroll.paid_at is not None

    def test_pay_requires_processed(self):
        payroll = make_payroll()
        with pytest.raises(InvalidStateTransitionError, match="only be paid when in processed"):
            payroll.pay()

    def test_process_requires_pending(self):
        payroll = make_payroll()
        payroll.cancel()
        with pytest.raises(InvalidStateTransitionError, match="only be processed when in pending"):
            payroll.process()

    @pytest.mark.parametrize("steps", [["process"], ["process", "pay"]])
    def test_cannot_cancel_after_processing(self, steps):
        payroll = make_payroll()
        for step in steps:
            getattr(payroll, step)()
        with pytest.raises(InvalidStateTransitionError, match=f"Cannot cancel a {payroll.status.value} payroll"):
            payroll.cancel()

    def test_update_deductions_recomputes_net(self):
        payroll = make_payroll()
        payroll.update_deductions(make_deductions(taxes=Decimal("500")))
        assert payroll.net_salary.amount == Decimal("4000.00")
        assert payroll.updated_at is not None

    def test_rejected_deduction_update_leaves_payroll_unchanged(self):
        payroll = make_payroll()
        with pytest.raises(InvalidValueError):
            payroll.update_deductions(make_deductions(taxes=Decimal("10000")))
        assert payroll.deductions.taxes == Decimal("1000.00")
        assert payroll.net_salary.amount == Decimal("3500.00")

    def test_update_deductions_only_while_pending(self):
        payroll = make_payroll()
        payroll.process()
        with pytest.raises(InvalidStateTransitionError, match="non-pending"):
            payroll.update_deductions(make_deductions())

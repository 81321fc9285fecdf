from session_roster.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_standard_calculator_prorates_by_minute():
    calc = StandardPayrollCalculator()

    assert calc.pay_for(pay_rate=20, minutes=120) == 40.0
    assert calc.pay_for(pay_rate=30, minutes=90) == 45.0
    assert calc.pay_for(pay_rate=12, minutes=15) == 3.0


def test_standard_calculator_never_negative():
    calc = StandardPayrollCalculator()

    assert calc.pay_for(pay_rate=20, minutes=0) == 0.0
    assert calc.pay_for(pay_rate=20, minutes=-30) == 0.0


def test_zero_rate_pays_nothing():
    assert StandardPayrollCalculator().pay_for(pay_rate=0, minutes=600) == 0.0

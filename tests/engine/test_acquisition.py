from dataclasses import replace
from decimal import Decimal

from src.engine.acquisition import size_acquisition


class TestSizeAcquisition:
    def test_canonical_portfolio(self, canonical_assumptions):
        acq = size_acquisition(canonical_assumptions)
        assert acq.total_homes == 500
        assert acq.total_acquisition_cost == Decimal("137923750")
        assert acq.loan_amount == Decimal("82754250")
        assert acq.equity_required == Decimal("55169500")
        assert acq.annual_interest_only_payment == Decimal("4551483.75")
        assert acq.loan_to_value == Decimal("0.60")

    def test_debt_plus_equity_is_cost(self, canonical_assumptions):
        for ltv in ("0", "0.35", "0.6", "0.75"):
            acq = size_acquisition(replace(canonical_assumptions, loan_to_value=Decimal(ltv)))
            assert acq.loan_amount + acq.equity_required == acq.total_acquisition_cost

    def test_unlevered(self, unlevered_assumptions):
        acq = size_acquisition(unlevered_assumptions)
        assert acq.loan_amount == Decimal("0")
        assert acq.annual_interest_only_payment == Decimal("0")
        assert acq.equity_required == acq.total_acquisition_cost

    def test_single_unit_type(self, canonical_assumptions):
        a = replace(canonical_assumptions, total_homes=100, bed3_count=100, bed4_count=0)
        acq = size_acquisition(a)
        assert acq.total_acquisition_cost == Decimal("24000000")

from decimal import Decimal

from src.engine.waterfall import PreferredReturnState, annual_preferred_return, distribute

LP = Decimal("0.80")
OWED = Decimal("100")


class TestAnnualPreferredReturn:
    def test_eight_percent_of_equity(self):
        assert annual_preferred_return(Decimal("55169500"), Decimal("0.08")) == Decimal("4413560")


class TestDistribute:
    def test_full_payment_with_excess(self):
        dist, state = distribute(Decimal("150"), OWED, PreferredReturnState(), LP)
        assert dist.preferred_return_paid == Decimal("100")
        assert dist.remaining_cash_flow == Decimal("50")
        assert dist.lp_distribution == Decimal("140")
        assert dist.gp_distribution == Decimal("10")
        assert state.unpaid == Decimal("0")
        assert state.accumulated_paid == Decimal("100")

    def test_exact_coverage_pays_in_full(self):
        dist, state = distribute(Decimal("100"), OWED, PreferredReturnState(), LP)
        assert dist.preferred_return_paid == Decimal("100")
        assert dist.remaining_cash_flow == Decimal("0")
        assert dist.gp_distribution == Decimal("0")
        assert state.unpaid == Decimal("0")

    def test_shortfall_accrues(self):
        dist, state = distribute(Decimal("60"), OWED, PreferredReturnState(), LP)
        assert dist.preferred_return_paid == Decimal("60")
        assert dist.lp_distribution == Decimal("60")
        assert dist.gp_distribution == Decimal("0")
        assert state.unpaid == Decimal("40")

    def test_accrual_is_simple_carry(self):
        """Two shortfall years: no interest on the carried balance."""
        state = PreferredReturnState()
        _, state = distribute(Decimal("60"), OWED, state, LP)
        _, state = distribute(Decimal("70"), OWED, state, LP)
        assert state.unpaid == Decimal("70")
        assert state.accumulated_paid == Decimal("130")

    def test_catch_up_clears_balance(self):
        state = PreferredReturnState(unpaid=Decimal("40"), accumulated_paid=Decimal("60"))
        dist, state = distribute(Decimal("200"), OWED, state, LP)
        assert dist.preferred_return_paid == Decimal("140")
        assert dist.remaining_cash_flow == Decimal("60")
        assert dist.lp_distribution == Decimal("188")
        assert dist.gp_distribution == Decimal("12")
        assert state.unpaid == Decimal("0")
        assert state.accumulated_paid == Decimal("200")

    def test_partial_catch_up_reduces_balance(self):
        """Covers this year's return but only part of the arrears."""
        state = PreferredReturnState(unpaid=Decimal("40"))
        dist, state = distribute(Decimal("120"), OWED, state, LP)
        assert dist.preferred_return_paid == Decimal("120")
        assert dist.remaining_cash_flow == Decimal("0")
        assert state.unpaid == Decimal("20")

    def test_negative_cash_flow_is_a_capital_call(self):
        """A deficit is paid through as a negative amount and widens the arrears."""
        dist, state = distribute(Decimal("-500"), OWED, PreferredReturnState(), LP)
        assert dist.preferred_return_paid == Decimal("-500")
        assert dist.remaining_cash_flow == Decimal("0")
        assert dist.lp_distribution == Decimal("-500")
        assert dist.gp_distribution == Decimal("0")
        assert state.unpaid == Decimal("600")
        assert state.accumulated_paid == Decimal("-500")

    def test_deficit_then_recovery(self):
        state = PreferredReturnState()
        _, state = distribute(Decimal("-500"), OWED, state, LP)
        dist, state = distribute(Decimal("1000"), OWED, state, LP)
        assert dist.preferred_return_paid == Decimal("700")
        assert dist.remaining_cash_flow == Decimal("300")
        assert state.unpaid == Decimal("0")
        assert state.accumulated_paid == Decimal("200")

    def test_split_identity(self):
        cfads = Decimal("12345.6789")
        dist, _ = distribute(cfads, Decimal("1000.01"), PreferredReturnState(), Decimal("0.7"))
        assert (
            dist.lp_distribution + dist.gp_distribution
            == dist.preferred_return_paid + dist.remaining_cash_flow
        )

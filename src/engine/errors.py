"""Engine error taxonomy."""


class InvalidAssumptions(ValueError):
    """Assumption set violates an invariant the projection depends on."""


class NonConvergent(ArithmeticError):
    """IRR bisection exhausted its iteration budget."""

    def __init__(self, rate, iterations: int):
        super().__init__(f"IRR did not converge after {iterations} iterations (last rate {rate})")
        self.rate = rate
        self.iterations = iterations

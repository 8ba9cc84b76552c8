"""Tests for the Probability value type."""
import logging
import math

import pytest

from probability_ghosts import InvalidProbabilityError, Probability


class TestConstruction:

    def test_half(self):
        assert float(Probability(0.5)) == 0.5

    def test_try_from(self):
        prob = Probability.try_from(0.5)
        assert isinstance(prob, Probability)
        assert float(prob) == 0.5

    def test_out_of_range(self):
        with pytest.raises(InvalidProbabilityError, match=r'Probability not in \[0, 1\]'):
            Probability(2.0)
        with pytest.raises(InvalidProbabilityError):
            Probability.try_from(-1.0)

    def test_nan(self):
        with pytest.raises(InvalidProbabilityError):
            Probability(math.nan)

    def test_infinity(self):
        with pytest.raises(InvalidProbabilityError):
            Probability(math.inf)

    def test_error_keeps_value(self):
        with pytest.raises(InvalidProbabilityError) as info:
            Probability(2.0)
        assert info.value.value == 2.0
        assert isinstance(info.value, ValueError)

    def test_bounds(self):
        assert Probability(0.0) == 0.0
        assert Probability(1.0) == 1.0
        assert Probability(-0.0) == 0.0

    def test_numeric_conversion(self):
        assert Probability(1) == 1.0
        assert Probability('0.25') == 0.25

    def test_unconvertible(self):
        with pytest.raises(TypeError):
            Probability(None)
        with pytest.raises(ValueError) as info:
            Probability('half')
        assert not isinstance(info.value, InvalidProbabilityError)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='probability_ghosts.probabilities'):
            with pytest.raises(InvalidProbabilityError):
                Probability(3.0)
        assert 'Rejected probability' in caplog.text


class TestBehavior:

    def test_immutable(self):
        prob = Probability(0.5)
        with pytest.raises(AttributeError):
            prob.value = 0.75

    def test_repr(self):
        assert repr(Probability(0.5)) == 'Probability(0.5)'
        assert str(Probability(0.5)) == '0.5'

    def test_arithmetic_gives_float(self):
        result = Probability(0.5) * 4
        assert type(result) is float
        assert result == 2.0

    def test_hashable(self):
        assert {Probability(0.5), 0.5} == {0.5}


class TestComplement:

    def test_half(self):
        half = Probability(0.5)
        assert float(half.complement()) == 0.5

    def test_returns_probability(self):
        assert isinstance(Probability(0.25).complement(), Probability)

    def test_double_complement(self):
        two_thirds = Probability(2.0 / 3.0)
        assert float(two_thirds.complement().complement()) == 2.0 / 3.0

    def test_endpoints(self):
        assert Probability(0.0).complement() == 1.0
        assert Probability(1.0).complement() == 0.0

    def test_rounding_is_not_corrected(self):
        comp = Probability(1e-17).complement()
        assert isinstance(comp, Probability)
        assert float(comp) == 1.0
        assert float(comp.complement()) == 0.0


class TestBinaryEntropy:

    def test_half(self):
        assert Probability(0.5).binary_entropy() == 1.0

    def test_endpoints(self):
        assert Probability(0.0).binary_entropy() == 0.0
        assert Probability(1.0).binary_entropy() == 0.0

    def test_result_is_plain_float(self):
        assert type(Probability(0.3).binary_entropy()) is float

"""Smoke test for the demonstration entry point."""

import sys

import pytest

import main
from algebra.field import ALPHA


def test_main_prints_scenarios(capsys, monkeypatch):
    monkeypatch.setattr(sys, 'argv', ['main.py', '3'])
    main.main()
    out = capsys.readouterr().out
    assert "1 / alpha = alpha+1" in out
    assert "y: 1" in out
    assert "alpha + x + x*x = 1.x^2 + 1.x + alpha" in out
    assert "x(alpha) = alpha" in out
    assert "lagrange([1, alpha], [1, alpha]) = 1.x" in out
    assert "lagrange([1, alpha], [alpha, 1])(1) = alpha" in out
    assert "Recovered from 2 shares: alpha\n" in out
    assert "Recovered from 3 shares: alpha+1\n" in out

    lines = out.splitlines()
    dealt = [l.split(": ", 1)[1] for l in lines if l.startswith("Dealer polynomial: ")]
    rebuilt = [l.split(": ", 1)[1] for l in lines if l.startswith("Recovered polynomial: ")]
    assert len(dealt) == 2
    assert rebuilt == dealt


@pytest.mark.parametrize("threshold, secret", [(0, ALPHA), (1, ALPHA), (2, ALPHA + 1)])
def test_run_sharing_rebuilds_dealer_polynomial(capsys, threshold, secret):
    poly, rebuilt = main.run_sharing(threshold, secret, seed=11)
    assert rebuilt == poly
    assert rebuilt(0) == secret

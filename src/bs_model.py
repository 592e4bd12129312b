"""
Black–Scholes pricing model: price and greeks for European calls and puts.

The model is wired to a Distribution and evaluates closed-form expressions only.
Inputs are not validated. Degenerate parameters (T=0, V=0, S<=0, K<=0) propagate
as inf/nan through every formula instead of raising, so callers that need strict
checks should test the outputs with math.isfinite.
"""
from __future__ import annotations
import functools
from dataclasses import dataclass, fields, asdict
from enum import Enum
from typing import Dict

import numpy as np

from distribution import Distribution, std_norm_dist


def _ieee(fn):
    # numpy scalars already follow IEEE-754; only silence the RuntimeWarnings
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return fn(*args, **kwargs)
    return wrapper


class OptionType(Enum):
    CALL = "C"
    PUT = "P"


@dataclass(frozen=True)
class BSParams:
    K: float       # strike (exercise price)
    S: float       # spot of the underlying
    T: float       # years to expiration
    R: float       # risk-free (continuous)
    V: float       # volatility (annualized)

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, np.float64(getattr(self, f.name)))

    @_ieee
    def d1(self) -> float:
        return (np.log(self.S / self.K) + (self.R + 0.5 * self.V * self.V) * self.T) / (self.V * np.sqrt(self.T))

    @_ieee
    def d2(self) -> float:
        return (np.log(self.S / self.K) + (self.R - 0.5 * self.V * self.V) * self.T) / (self.V * np.sqrt(self.T))


@dataclass(frozen=True)
class BSResult:
    price: float
    delta: float
    gamma: float
    theta: float   # per year
    vega: float    # per 1.00 vol (100%)
    rho: float     # per 1.00 rate

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


class BlackScholesModel:
    """
    Closed-form Black–Scholes price and greeks (no dividends).

    Every accessor takes the parameter bundle and the option type and is a
    pure function of them; an instance only holds the distribution, so one
    model can be shared freely.

    >>> model = BlackScholesModel(std_norm_dist())
    >>> res = model.calc(BSParams(K=100, S=100, T=1.0, R=0.05, V=0.2), OptionType.CALL)
    """

    def __init__(self, dist: Distribution):
        self.dist = dist

    def calc(self, p: BSParams, option_type: OptionType) -> BSResult:
        return BSResult(
            price=self.price(p, option_type),
            delta=self.delta(p, option_type),
            gamma=self.gamma(p, option_type),
            theta=self.theta(p, option_type),
            vega=self.vega(p, option_type),
            rho=self.rho(p, option_type),
        )

    @_ieee
    def price(self, p: BSParams, option_type: OptionType) -> float:
        """
        S·Δ − ρ/T, which expands to
        Call: S·N(d1) − K·e^(−RT)·N(d2)
        Put:  K·e^(−RT)·N(−d2) − S·N(−d1)
        """
        return float(p.S * self.delta(p, option_type) - self.rho(p, option_type) / p.T)

    @_ieee
    def delta(self, p: BSParams, option_type: OptionType) -> float:
        if option_type is OptionType.CALL:
            return float(self.dist.cdf(p.d1()))
        return float(-self.dist.cdf(-p.d1()))

    @_ieee
    def gamma(self, p: BSParams, option_type: OptionType) -> float:
        return float(self.dist.pdf(p.d1()) / (p.S * p.V * np.sqrt(p.T)))

    @_ieee
    def theta(self, p: BSParams, option_type: OptionType) -> float:
        # per year; the put/call difference comes entirely through rho
        return float(-p.V * 0.5 * self.vega(p, option_type) / p.T - p.R * self.rho(p, option_type) / p.T)

    @_ieee
    def vega(self, p: BSParams, option_type: OptionType) -> float:
        return float(p.S * self.dist.pdf(p.d1()) * np.sqrt(p.T))

    @_ieee
    def rho(self, p: BSParams, option_type: OptionType) -> float:
        disc = p.K * p.T * np.exp(-p.R * p.T)
        if option_type is OptionType.CALL:
            return float(disc * self.dist.cdf(p.d2()))
        return float(-disc * self.dist.cdf(-p.d2()))


def make_black_scholes_model(dist: Distribution = None) -> BlackScholesModel:
    "Model wired to the given distribution (standard normal by default)."
    return BlackScholesModel(dist if dist is not None else std_norm_dist())

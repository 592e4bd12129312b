"""
Probability distributions used by the Black–Scholes formulas.
Only the pdf and cdf are needed; the normal law is computed with math.erf.
"""
from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

SQRT2PI = math.sqrt(2.0 * math.pi)
SQRT2 = math.sqrt(2.0)


class Distribution(ABC):
    """
    A probability distribution of a real value.

    Pricing models only ever ask for the density and the cumulative
    probability, so any law exposing those two can be plugged in.
    """

    @abstractmethod
    def pdf(self, x: float) -> float:
        "Probability density function."

    @abstractmethod
    def cdf(self, x: float) -> float:
        "Cumulative distribution function."


@dataclass(frozen=True)
class NormalDistribution(Distribution):
    mean: float = 0.0
    std_dev: float = 1.0

    def pdf(self, x: float) -> float:
        z = (x - self.mean) / self.std_dev
        return math.exp(-0.5 * z * z) / (self.std_dev * SQRT2PI)

    def cdf(self, x: float) -> float:
        # erf saturates at +/-1, so infinite arguments map to 0 and 1
        return 0.5 * (1.0 + math.erf((x - self.mean) / (self.std_dev * SQRT2)))


def std_norm_dist() -> NormalDistribution:
    "Standard normal: mean 0, standard deviation 1."
    return NormalDistribution(mean=0.0, std_dev=1.0)


_STD = std_norm_dist()


def phi(x: float) -> float:
    "Standard normal pdf."
    return _STD.pdf(x)


def N(x: float) -> float:
    "Standard normal cdf via error function."
    return _STD.cdf(x)

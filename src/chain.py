"""
Evaluate Black–Scholes price and greeks across a strike grid and expirations.
Rows come back as a pandas DataFrame, one per (expiration, option type, strike).
"""
from __future__ import annotations
import datetime as dt
import logging
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from bs_model import BlackScholesModel, BSParams, OptionType
from utils import DEFAULT_BASIS, yearfrac

logger = logging.getLogger(__name__)

# ---------------------------
# Configuration
# ---------------------------

# Strikes as a % of spot (moneyness)
M_GRID = [0.80, 0.90, 1.00, 1.10, 1.20]

GREEK_COLUMNS = ["price", "delta", "gamma", "theta", "vega", "rho"]
CHAIN_COLUMNS = ["option_type", "strike", "moneyness_K_over_S", "T_years"] + GREEK_COLUMNS


def strike_grid(S: float, moneyness: Sequence[float] = M_GRID) -> np.ndarray:
    return S * np.asarray(moneyness, dtype=float)


def price_chain(model: BlackScholesModel, S: float, T: float, R: float, V: float,
                moneyness: Sequence[float] = M_GRID,
                option_types: Iterable[OptionType] = (OptionType.CALL, OptionType.PUT)) -> pd.DataFrame:
    """
    Price every strike of the grid for a single expiry.
    Degenerate inputs are not filtered: their rows simply hold inf/nan.
    """
    rows = []
    for otype in option_types:
        for m, K in zip(moneyness, strike_grid(S, moneyness)):
            res = model.calc(BSParams(K=K, S=S, T=T, R=R, V=V), otype)
            rows.append({
                "option_type": otype.value,
                "strike": float(K),
                "moneyness_K_over_S": float(m),
                "T_years": float(T),
                **res.as_dict(),
            })
    return pd.DataFrame(rows, columns=CHAIN_COLUMNS)


def build_chain(model: BlackScholesModel, S: float, R: float, V: float,
                val_date: dt.date, expirations: Iterable[dt.date],
                moneyness: Sequence[float] = M_GRID,
                basis: str = DEFAULT_BASIS) -> pd.DataFrame:
    """
    Chain for several expirations, each converted to T with yearfrac.
    Expirations on or before val_date are kept but logged, since every
    greek for them is non-finite.
    """
    frames = []
    for exp in expirations:
        T = yearfrac(val_date, exp, basis)
        if T <= 0:
            logger.warning("expiration %s is not after valuation date %s; rows will be non-finite",
                           exp.isoformat(), val_date.isoformat())
        logger.debug("pricing %d strikes for %s (T=%.6f)", len(moneyness), exp.isoformat(), T)
        df = price_chain(model, S, T, R, V, moneyness)
        df.insert(0, "expiration", exp.isoformat())
        frames.append(df)

    if not frames:
        return pd.DataFrame(columns=["expiration"] + CHAIN_COLUMNS)

    out = pd.concat(frames, ignore_index=True)
    return out.sort_values(["expiration", "option_type", "strike"]).reset_index(drop=True)

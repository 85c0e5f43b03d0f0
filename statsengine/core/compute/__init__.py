"""
Numerical building blocks: timing, special functions, t distribution.
"""

from statsengine.core.compute.timing import Timer
from statsengine.core.compute.special import betainc, betaincc, log_beta
from statsengine.core.compute.tdist import t_pdf, t_cdf, t_sf, t_ppf, t_isf

__all__ = [
    "Timer",
    "betainc",
    "betaincc",
    "log_beta",
    "t_pdf",
    "t_cdf",
    "t_sf",
    "t_ppf",
    "t_isf",
]

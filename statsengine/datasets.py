"""
Reference datasets.

EXACT port of R's datasets::ToothGrowth: the length of odontoblasts in 60
guinea pigs, each receiving one of three vitamin C doses (0.5, 1 or 2
mg/day) by one of two delivery methods (orange juice, OJ, or ascorbic
acid, VC). Ten animals per cell.
"""

import numpy as np

from statsengine.core.dataset import Dataset

# From R: data(ToothGrowth) - EXACT VALUES, in R's row order
# (VC 0.5, VC 1, VC 2, OJ 0.5, OJ 1, OJ 2)
toothgrowth_len = np.array([
    4.2, 11.5, 7.3, 5.8, 6.4, 10.0, 11.2, 11.2, 5.2, 7.0,
    16.5, 16.5, 15.2, 17.3, 22.5, 17.3, 13.6, 14.5, 18.8, 15.5,
    23.6, 18.5, 33.9, 25.5, 26.4, 32.5, 26.7, 21.5, 23.3, 29.5,
    15.2, 21.5, 17.6, 9.7, 14.5, 10.0, 8.2, 9.4, 16.5, 9.7,
    19.7, 23.3, 23.6, 26.4, 20.0, 25.2, 25.8, 21.2, 14.5, 27.3,
    25.5, 26.4, 22.4, 24.5, 24.8, 30.9, 26.4, 27.3, 29.4, 23.0,
])

toothgrowth_supp = np.array(["VC"] * 30 + ["OJ"] * 30)

toothgrowth_dose = np.tile(np.repeat([0.5, 1.0, 2.0], 10), 2)

# R orders the supp factor alphabetically and dose numerically
TOOTHGROWTH_LEVELS = {
    'supp': ('OJ', 'VC'),
    'dose': (0.5, 1.0, 2.0),
}


def toothgrowth() -> Dataset:
    """ToothGrowth as a Dataset: response 'len', factors 'supp' and 'dose'."""
    return Dataset.from_arrays(
        toothgrowth_len,
        response_name='len',
        levels=TOOTHGROWTH_LEVELS,
        supp=toothgrowth_supp,
        dose=toothgrowth_dose,
    )

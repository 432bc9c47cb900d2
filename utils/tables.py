# utils/tables.py
from __future__ import annotations

import pandas as pd

from core.data_loader import CategoryLike, UnitConverterDataLoader

RATIO_COLUMNS = ["From", "To", "Ratio", "Offset", "Offset First"]


def ratios_frame(loader: UnitConverterDataLoader, category: CategoryLike) -> pd.DataFrame:
    """
    One row per ordered unit pair of ``category``, in display order.
    Ratio/Offset keep their exact Fraction values (object dtype).
    """
    units = loader.load_ordered_units(category)
    rows = []
    for src in units:
        ratios = loader.load_ordered_ratios(src)
        for dst in units:
            data = ratios.get(dst)
            if data is None:
                continue
            rows.append(
                {
                    "From": src.abbreviation,
                    "To": dst.abbreviation,
                    "Ratio": data.ratio,
                    "Offset": data.offset,
                    "Offset First": data.offset_first,
                }
            )
    return pd.DataFrame(rows, columns=RATIO_COLUMNS)


def ratio_matrix(loader: UnitConverterDataLoader, category: CategoryLike) -> pd.DataFrame:
    """Square float matrix: cell [A, B] is the ratio converting A into B."""
    df = ratios_frame(loader, category)
    order = [u.abbreviation for u in loader.load_ordered_units(category)]
    if df.empty:
        return pd.DataFrame(index=order, columns=order, dtype=float)
    matrix = df.assign(Ratio=df["Ratio"].astype(float)).pivot(index="From", columns="To", values="Ratio")
    return matrix.reindex(index=order, columns=order)

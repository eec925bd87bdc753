"""Tabular export of amortization schedules."""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from payoff.models.schedule import ScheduleRow

SCHEDULE_COLUMNS = ["month", "start", "payment", "interest", "principal", "end"]


def schedule_to_frame(rows: Iterable[ScheduleRow]) -> pd.DataFrame:
    """One row per month; principal is the part of the payment not eaten by interest."""
    records = [row.model_dump() for row in rows]
    if not records:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    df = pd.DataFrame.from_records(records)
    df["principal"] = df["payment"] - df["interest"]
    return df[SCHEDULE_COLUMNS]


def schedule_to_csv(rows: Iterable[ScheduleRow], decimals: int = 2) -> str:
    df = schedule_to_frame(rows)
    if not df.empty:
        df = df.round({c: decimals for c in SCHEDULE_COLUMNS if c != "month"})
    return df.to_csv(index=False)

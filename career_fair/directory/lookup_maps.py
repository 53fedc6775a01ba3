"""
Company name -> majors / positions / work authorizations maps.

Each map comes from one join query, so materializing a company list costs
three queries in total instead of three per company.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import pandas as pd
from sqlalchemy.engine import Engine

from career_fair.db.core import get_dataframe
from career_fair.directory import queries
from career_fair.directory.models import Major
from career_fair.utils.logger import get_logger

logger = get_logger("directory.lookup_maps")


@dataclass
class LookupMaps:
    majors: Dict[str, List[Major]] = field(default_factory=dict)
    positions: Dict[str, List[str]] = field(default_factory=dict)
    work_auths: Dict[str, List[str]] = field(default_factory=dict)

    def majors_for(self, company_name: str) -> List[Major]:
        return list(self.majors.get(company_name, []))

    def positions_for(self, company_name: str) -> List[str]:
        return list(self.positions.get(company_name, []))

    def work_auths_for(self, company_name: str) -> List[str]:
        return list(self.work_auths.get(company_name, []))


def group_by_company(df: pd.DataFrame, to_value: Callable) -> Dict[str, list]:
    """
    Group rows by company_name, keeping the query's row order inside each
    group.

    Args:
        df: Rows with a company_name column
        to_value: Turns one row (namedtuple) into the stored value

    Returns:
        dict: company name -> list of values
    """
    grouped: Dict[str, list] = {}
    if df.empty:
        return grouped
    for company_name, rows in df.groupby("company_name", sort=False):
        grouped[company_name] = [to_value(row) for row in rows.itertuples(index=False)]
    return grouped


def build_lookup_maps(engine: Engine) -> LookupMaps:
    """
    Run the three join queries and build the maps

    Args:
        engine: SQLAlchemy engine

    Returns:
        LookupMaps: The built maps
    """
    blank = {"blank": queries.BLANK_TYPE}

    majors_df = get_dataframe(engine, queries.COMPANY_MAJORS)
    positions_df = get_dataframe(engine, queries.COMPANY_POSITIONS, blank)
    work_auths_df = get_dataframe(engine, queries.COMPANY_WORK_AUTHS, blank)

    maps = LookupMaps(
        majors=group_by_company(majors_df, lambda row: Major(row.major_name, row.abbreviation)),
        positions=group_by_company(positions_df, lambda row: row.position),
        work_auths=group_by_company(work_auths_df, lambda row: row.work_auth),
    )
    logger.info(
        f"Built lookup maps: {len(maps.majors)} companies with majors, "
        f"{len(maps.positions)} with positions, {len(maps.work_auths)} with work authorizations"
    )
    return maps


class LookupMapsBuilder:
    """
    Builds the lookup maps on first use and keeps them for the lifetime of
    the builder. The maps are not refreshed when the database changes;
    call `reset()` to force a rebuild on next access.
    """

    def __init__(self, engine: Engine):
        self._engine = engine
        self._maps: Optional[LookupMaps] = None
        self._lock = threading.Lock()

    def get(self) -> LookupMaps:
        maps = self._maps
        if maps is not None:
            return maps
        with self._lock:
            if self._maps is None:
                self._maps = build_lookup_maps(self._engine)
            return self._maps

    def reset(self):
        with self._lock:
            self._maps = None
        logger.debug("Lookup maps reset")

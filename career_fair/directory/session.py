#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
DirectorySession: the operations the app calls to read the career fair
directory.

One session is created per application run and handed to whoever needs
directory data. It owns the database engine, the lookup maps (built once,
on first use) and the last filter/search results.
"""

from typing import Dict, Iterable, List, Optional, Tuple, Union

from sqlalchemy.engine import Engine

from career_fair.db.core import execute_query, fetch_column, get_engine
from career_fair.directory import queries
from career_fair.directory.cache import LastResultCache
from career_fair.directory.keyed import (
    KeyedLookup,
    KeySelector,
    build_company_lookup,
    build_major_lookup,
)
from career_fair.directory.lookup_maps import LookupMaps, LookupMapsBuilder
from career_fair.directory.materializer import materialize_companies
from career_fair.directory.models import Company, CompanyKey, Major, MajorKey, Room
from career_fair.utils.logger import get_logger

logger = get_logger("directory.session")

BLANK = {"blank": queries.BLANK_TYPE}


class DirectorySession:
    """
    Read access to the directory database.

    Args:
        database_path: SQLite file, defaults to Config.Database.PATH
        engine: Ready SQLAlchemy engine; takes precedence over database_path
    """

    def __init__(self, database_path: Optional[str] = None, engine: Optional[Engine] = None):
        self._owns_engine = engine is None
        self.engine = engine if engine is not None else get_engine(database_path)
        self._maps = LookupMapsBuilder(self.engine)
        self._cache = LastResultCache()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        """Dispose the engine if this session created it."""
        if self._owns_engine:
            self.engine.dispose()
            logger.debug("Disposed database engine")

    # ------------------------------------------------------------------
    # Lookup maps
    # ------------------------------------------------------------------
    def lookup_maps(self) -> LookupMaps:
        return self._maps.get()

    def reset_lookup_maps(self):
        self._maps.reset()

    # ------------------------------------------------------------------
    # Company listings
    # ------------------------------------------------------------------
    def _run_company_query(self, query: queries.CompanyQuery) -> List[Company]:
        rows = execute_query(self.engine, query.sql, query.params)
        return materialize_companies(rows, self._maps)

    def all_companies(self) -> List[Company]:
        """Every company, in display order."""
        return self._run_company_query(queries.build_all_companies_query())

    def all_company_names(self) -> List[str]:
        return fetch_column(self.engine, queries.ALL_COMPANY_NAMES)

    def search_companies(self, term: Optional[str] = "") -> List[Company]:
        """
        Companies whose name contains `term`; an empty term returns all of
        them. Remembers the matched names for `searched_names()`.
        """
        companies = self._run_company_query(queries.build_search_query(term))
        self._cache.store_search(companies)
        logger.debug(f"Search {term!r} matched {len(companies)} companies")
        return companies

    def searched_names(self) -> List[str]:
        return self._cache.searched_names()

    def filter_companies(
        self,
        room: Optional[Union[Room, str]] = None,
        majors: Optional[Iterable[str]] = None,
        work_auths: Optional[Iterable[str]] = None,
        positions: Optional[Iterable[str]] = None,
    ) -> List[Company]:
        """
        Companies matching every active filter.

        Args:
            room: Room name, or empty for any room
            majors: Major abbreviations; matches companies recruiting any of them
            work_auths: Work authorization types; matches any of them
            positions: Position types; matches any of them

        Returns:
            list: Matching companies in display order. The result is also
            remembered and split into blank / non-blank matches.
        """
        majors = queries.normalize_values(majors)
        work_auths = queries.normalize_values(work_auths)
        positions = queries.normalize_values(positions)

        query = queries.build_filter_query(room, majors, work_auths, positions)
        companies = self._run_company_query(query)
        self._cache.store_filter(
            companies,
            majors_active=bool(majors),
            work_auths_active=bool(work_auths),
            positions_active=bool(positions),
        )
        logger.debug(
            f"Filter room={room!r} majors={majors} work_auths={work_auths} "
            f"positions={positions} matched {len(companies)} companies"
        )
        return companies

    def filtered_names(self) -> List[str]:
        """
        Names from the last `filter_companies` call. Before any filter has
        run this is the full list of company names.
        """
        names = self._cache.filtered_names()
        if names is None:
            return self.all_company_names()
        return names

    def filtered_names_partition(self, blanks: bool) -> List[str]:
        """Last filtered names that did (blanks=True) or did not match through a blank value."""
        return self._cache.filtered_names_partition(blanks)

    def filtered_companies_partition(self, blanks: bool) -> List[Company]:
        return self._cache.filtered_companies_partition(blanks)

    def filtered_partitions(self) -> Tuple[List[str], List[str]]:
        """Blank and non-blank names of the last filter, taken from the same result."""
        return self._cache.filtered_partitions()

    # ------------------------------------------------------------------
    # Single company attributes
    # ------------------------------------------------------------------
    def majors_for_company(self, company_name: str) -> List[Major]:
        rows = execute_query(self.engine, queries.MAJORS_FOR_COMPANY, {"company": company_name})
        return [Major(row["major_name"], row["abbreviation"]) for row in rows]

    def positions_for_company(self, company_name: str) -> List[str]:
        return fetch_column(self.engine, queries.POSITIONS_FOR_COMPANY, {"company": company_name, **BLANK})

    def work_auths_for_company(self, company_name: str) -> List[str]:
        return fetch_column(self.engine, queries.WORK_AUTHS_FOR_COMPANY, {"company": company_name, **BLANK})

    # ------------------------------------------------------------------
    # Filter picker lists
    # ------------------------------------------------------------------
    def all_majors(self, order_by_name: bool = True) -> List[Major]:
        query = queries.ALL_MAJORS_BY_NAME if order_by_name else queries.ALL_MAJORS_BY_ABBREVIATION
        return [Major(row["major_name"], row["abbreviation"]) for row in execute_query(self.engine, query, BLANK)]

    def all_major_names(self) -> List[str]:
        return fetch_column(self.engine, queries.ALL_MAJOR_NAMES, BLANK)

    def all_major_abbreviations(self) -> List[str]:
        return fetch_column(self.engine, queries.ALL_MAJOR_ABBREVIATIONS, BLANK)

    def all_work_auths(self) -> List[str]:
        return fetch_column(self.engine, queries.ALL_WORK_AUTHS, BLANK)

    def all_positions(self) -> List[str]:
        return fetch_column(self.engine, queries.ALL_POSITIONS, BLANK)

    # ------------------------------------------------------------------
    # Keyed lookups
    # ------------------------------------------------------------------
    def company_lookup(self, key: KeySelector = CompanyKey.NAME,
                       companies: Optional[Iterable[Company]] = None) -> KeyedLookup[Company]:
        """Companies keyed by name or table number; defaults to all companies."""
        if companies is None:
            companies = self.all_companies()
        return build_company_lookup(companies, key)

    def major_lookup(self, key: KeySelector = MajorKey.ABBREVIATION,
                     majors: Optional[Iterable[Major]] = None) -> KeyedLookup[Major]:
        """Majors keyed by name or abbreviation; defaults to all majors."""
        if majors is None:
            majors = self.all_majors(order_by_name=False)
        return build_major_lookup(majors, key)

    def table_company_map(self, room: Union[Room, str] = Room.WOOD) -> Dict[str, Company]:
        """Companies in one room, keyed by table number."""
        room_name = room.value if isinstance(room, Room) else room
        in_room = [c for c in self.all_companies() if c.room == room_name]
        return build_company_lookup(in_room, CompanyKey.TABLE_NUMBER).unwrap()

"""
Remembers the results of the most recent filter and name search.
"""

import copy
import threading
from typing import List, Optional, Tuple

from career_fair.directory.models import Company


def is_blank_match(company: Company, majors_active: bool, work_auths_active: bool,
                   positions_active: bool) -> bool:
    """
    True when an actively filtered dimension has no recorded values for the
    company, i.e. it matched through the blank/"ALL" rows only.
    """
    if majors_active and not company.majors:
        return True
    if work_auths_active and not company.work_auths:
        return True
    if positions_active and not company.positions:
        return True
    return False


class LastResultCache:
    """
    Last filtered and last searched results.

    Every store replaces the previous state in one step; every accessor
    hands out a copy.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._searched_names: List[str] = []
        self._filtered_names: Optional[List[str]] = None
        self._blank: List[Company] = []
        self._non_blank: List[Company] = []

    def store_search(self, companies: List[Company]):
        names = [c.name for c in companies]
        with self._lock:
            self._searched_names = names

    def store_filter(self, companies: List[Company], majors_active: bool = False,
                     work_auths_active: bool = False, positions_active: bool = False):
        blank: List[Company] = []
        non_blank: List[Company] = []
        for company in companies:
            if is_blank_match(company, majors_active, work_auths_active, positions_active):
                blank.append(copy.deepcopy(company))
            else:
                non_blank.append(copy.deepcopy(company))
        names = [c.name for c in companies]
        with self._lock:
            self._filtered_names = names
            self._blank = blank
            self._non_blank = non_blank

    @property
    def has_filtered(self) -> bool:
        return self._filtered_names is not None

    def searched_names(self) -> List[str]:
        with self._lock:
            return list(self._searched_names)

    def filtered_names(self) -> Optional[List[str]]:
        """Names from the last filter, or None if no filter has run yet."""
        with self._lock:
            if self._filtered_names is None:
                return None
            return list(self._filtered_names)

    def filtered_names_partition(self, blanks: bool) -> List[str]:
        with self._lock:
            source = self._blank if blanks else self._non_blank
            return [c.name for c in source]

    def filtered_companies_partition(self, blanks: bool) -> List[Company]:
        with self._lock:
            source = self._blank if blanks else self._non_blank
            return copy.deepcopy(source)

    def filtered_partitions(self) -> Tuple[List[str], List[str]]:
        """(blank names, non-blank names) of the last filter, read together."""
        with self._lock:
            return [c.name for c in self._blank], [c.name for c in self._non_blank]

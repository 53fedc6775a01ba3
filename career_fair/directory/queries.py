"""
SQL for the directory.

Static statements are module constants; the company listing statements
(filtered and name search) are assembled by `build_filter_query` and
`build_search_query`, which only ever splice fixed SQL fragments into the
text. Every caller-supplied value travels as a bound parameter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from career_fair.directory.models import Room
from career_fair.utils.config import Config

ALL_MAJORS = Config.Directory.ALL_MAJORS_ABBREVIATION
BLANK_TYPE = Config.Directory.BLANK_TYPE

# Display order: ignore case, a leading "The ", periods and spaces
SORT_KEY_SQL = (
    "replace(replace(lower("
    "CASE WHEN substr(company.name, 1, 4) = 'The ' "
    "THEN substr(company.name, 5) ELSE company.name END"
    "), '.', ''), ' ', '')"
)
ORDER_BY_COMPANY = f"ORDER BY {SORT_KEY_SQL}, company.name"

COMPANY_COLUMNS = (
    "company.name AS company_name, company.website AS website, "
    "location.tableNum AS table_num, room.name AS room"
)

BASE_FROM = (
    "FROM company "
    "JOIN companyToLocation ON company._id = companyToLocation.companyID "
    "JOIN location ON companyToLocation.locationID = location._id "
    "JOIN room ON location.roomID = room._id"
)

MAJOR_JOIN = (
    "JOIN companyToMajor ON company._id = companyToMajor.companyID "
    "JOIN major ON companyToMajor.majorID = major._id"
)
WORK_AUTH_JOIN = (
    "JOIN companyToWorkAuth ON company._id = companyToWorkAuth.companyID "
    "JOIN workAuth ON companyToWorkAuth.workAuthID = workAuth._id"
)
POSITION_JOIN = (
    "JOIN companyToType ON company._id = companyToType.companyID "
    "JOIN employmentType ON companyToType.typeID = employmentType._id"
)

ALL_COMPANY_NAMES = f"SELECT DISTINCT company.name AS company_name FROM company {ORDER_BY_COMPANY}"

# Lookup map sources, one row per (company, attribute)
COMPANY_MAJORS = (
    "SELECT DISTINCT company.name AS company_name, major.name AS major_name, "
    "major.abbreviation AS abbreviation "
    f"FROM company {MAJOR_JOIN} "
    "ORDER BY major.abbreviation"
)
COMPANY_POSITIONS = (
    "SELECT DISTINCT company.name AS company_name, employmentType.type AS position "
    f"FROM company {POSITION_JOIN} "
    "WHERE employmentType.type <> :blank"
)
COMPANY_WORK_AUTHS = (
    "SELECT DISTINCT company.name AS company_name, workAuth.type AS work_auth "
    f"FROM company {WORK_AUTH_JOIN} "
    "WHERE workAuth.type <> :blank"
)

# Single company attributes
MAJORS_FOR_COMPANY = (
    "SELECT major.name AS major_name, major.abbreviation AS abbreviation "
    f"FROM company {MAJOR_JOIN} "
    "WHERE company.name = :company "
    "ORDER BY major.abbreviation"
)
POSITIONS_FOR_COMPANY = (
    "SELECT employmentType.type AS position "
    f"FROM company {POSITION_JOIN} "
    "WHERE company.name = :company AND employmentType.type <> :blank"
)
WORK_AUTHS_FOR_COMPANY = (
    "SELECT workAuth.type AS work_auth "
    f"FROM company {WORK_AUTH_JOIN} "
    "WHERE company.name = :company AND workAuth.type <> :blank"
)

# Global lists for the filter pickers
ALL_MAJORS_BY_NAME = (
    "SELECT name AS major_name, abbreviation FROM major "
    "WHERE name <> :blank ORDER BY name"
)
ALL_MAJORS_BY_ABBREVIATION = (
    "SELECT name AS major_name, abbreviation FROM major "
    "WHERE name <> :blank ORDER BY abbreviation"
)
ALL_MAJOR_NAMES = "SELECT name FROM major WHERE name <> :blank ORDER BY name"
ALL_MAJOR_ABBREVIATIONS = (
    "SELECT abbreviation FROM major WHERE abbreviation <> :blank ORDER BY abbreviation"
)
ALL_WORK_AUTHS = "SELECT type FROM workAuth WHERE type <> :blank ORDER BY type"
ALL_POSITIONS = "SELECT type FROM employmentType WHERE type <> :blank ORDER BY type"


@dataclass
class CompanyQuery:
    sql: str
    params: Dict[str, Any] = field(default_factory=dict)


def company_sort_key(name: str) -> str:
    """Python twin of SORT_KEY_SQL."""
    if name.startswith("The "):
        name = name[4:]
    return name.lower().replace(".", "").replace(" ", "")


def _escape_like(value: str) -> str:
    """
    Escape \\, % and _ so a search term matches literally. Used with
    ESCAPE '\\' in SQL.
    """
    value = value.replace("\\", "\\\\")
    return value.replace("%", "\\%").replace("_", "\\_")


def normalize_values(values: Union[None, str, Iterable[Any]]) -> List[str]:
    """Turn a filter argument into a de-duplicated list, keeping order."""
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    return list(dict.fromkeys(str(v) for v in values))


def _in_clause(column: str, prefix: str, values: List[str], params: Dict[str, Any]) -> str:
    placeholders = []
    for i, value in enumerate(values):
        name = f"{prefix}_{i}"
        params[name] = value
        placeholders.append(f":{name}")
    return f"{column} IN ({', '.join(placeholders)})"


def _select_companies(joins: List[str], conditions: List[str], params: Dict[str, Any]) -> CompanyQuery:
    sql = f"SELECT DISTINCT {COMPANY_COLUMNS} {BASE_FROM}"
    if joins:
        sql += " " + " ".join(joins)
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)
    sql += f" {ORDER_BY_COMPANY}"
    return CompanyQuery(sql=sql, params=params)


def build_all_companies_query() -> CompanyQuery:
    return _select_companies([], [], {})


def build_filter_query(
    room: Optional[Union[Room, str]] = None,
    majors: Optional[Iterable[str]] = None,
    work_auths: Optional[Iterable[str]] = None,
    positions: Optional[Iterable[str]] = None,
) -> CompanyQuery:
    """
    Build the company listing for a combination of filters.

    Each empty argument leaves its dimension unfiltered. Values inside one
    dimension are OR-ed (IN list); active dimensions are AND-ed through
    inner joins.

    An active major filter also accepts the "ALL" major, and active
    work-auth or position filters also accept the blank type, so companies
    that recruit every major or did not state a preference still show up.
    A filter on majors M therefore matches any company with a major in
    M or "ALL", not only companies listing a major from M. This is intended.

    Args:
        room: Room name ("Wood", "Multipurpose", "Hall"), or empty for any room
        majors: Major abbreviations
        work_auths: Work authorization types
        positions: Employment (position) types

    Returns:
        CompanyQuery: SQL text and bound parameters
    """
    joins: List[str] = []
    conditions: List[str] = []
    params: Dict[str, Any] = {}

    if isinstance(room, Room):
        room = room.value
    if room:
        conditions.append("room.name = :room")
        params["room"] = room

    major_values = normalize_values(majors)
    if major_values:
        joins.append(MAJOR_JOIN)
        conditions.append(_in_clause(
            "major.abbreviation", "major", normalize_values([ALL_MAJORS] + major_values), params
        ))

    work_auth_values = normalize_values(work_auths)
    if work_auth_values:
        joins.append(WORK_AUTH_JOIN)
        conditions.append(_in_clause(
            "workAuth.type", "work_auth", normalize_values([BLANK_TYPE] + work_auth_values), params
        ))

    position_values = normalize_values(positions)
    if position_values:
        joins.append(POSITION_JOIN)
        conditions.append(_in_clause(
            "employmentType.type", "position", normalize_values([BLANK_TYPE] + position_values), params
        ))

    return _select_companies(joins, conditions, params)


def build_search_query(term: Optional[str]) -> CompanyQuery:
    """
    Build the company listing for a name substring search.

    An empty term lists every company. Matching is case-insensitive for
    ASCII letters (SQLite LIKE).
    """
    if not term:
        return build_all_companies_query()
    params = {"pattern": f"%{_escape_like(term)}%"}
    return _select_companies([], ["company.name LIKE :pattern ESCAPE '\\'"], params)

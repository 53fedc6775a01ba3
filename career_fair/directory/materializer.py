"""
Turns company listing rows into Company records.
"""

from typing import Any, Dict, Iterable, List

from career_fair.directory.lookup_maps import LookupMaps, LookupMapsBuilder
from career_fair.directory.models import Company


def row_to_company(row: Dict[str, Any], maps: LookupMaps) -> Company:
    """
    Build one Company from a listing row, enriched from the lookup maps

    Args:
        row: Mapping with company_name, website, table_num and room
        maps: Built lookup maps

    Returns:
        Company: Record with its own copies of the attribute lists
    """
    name = row["company_name"]
    return Company(
        name=name,
        website=row.get("website"),
        table_num=row.get("table_num"),
        room=row.get("room"),
        majors=maps.majors_for(name),
        positions=maps.positions_for(name),
        work_auths=maps.work_auths_for(name),
    )


def materialize_companies(rows: Iterable[Dict[str, Any]], builder: LookupMapsBuilder) -> List[Company]:
    """
    Build Company records for every row. The lookup maps are only built
    (once) when there is at least one row to enrich.
    """
    rows = list(rows)
    if not rows:
        return []
    maps = builder.get()
    return [row_to_company(row, maps) for row in rows]

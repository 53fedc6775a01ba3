"""
Record types returned by the directory layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Room(str, Enum):
    WOOD = "Wood"
    MULTIPURPOSE = "Multipurpose"
    HALL = "Hall"


class CompanyKey(str, Enum):
    NAME = "name"
    TABLE_NUMBER = "table_num"


class MajorKey(str, Enum):
    NAME = "name"
    ABBREVIATION = "abbreviation"


@dataclass(frozen=True)
class Major:
    name: str
    abbreviation: str


@dataclass
class Company:
    """
    A company attending the fair.

    List fields are never None; a company that recruits no majors has an
    empty `majors` list.
    """
    name: str
    website: str = ""
    table_num: str = ""
    room: str = ""
    majors: List[Major] = field(default_factory=list)
    positions: List[str] = field(default_factory=list)
    work_auths: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Company name must not be empty")
        # SQLite hands back NULL for unset columns
        self.website = self.website or ""
        self.table_num = "" if self.table_num is None else str(self.table_num)
        self.room = self.room or ""

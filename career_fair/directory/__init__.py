"""
Directory package: companies, majors, positions and work authorizations
read from the career fair database.
"""

from career_fair.directory.models import Company, Major, Room, CompanyKey, MajorKey
from career_fair.directory.keyed import (
    KeyedLookup,
    InvalidKeySelectorError,
    build_company_lookup,
    build_major_lookup,
)
from career_fair.directory.lookup_maps import LookupMaps, LookupMapsBuilder, build_lookup_maps
from career_fair.directory.cache import LastResultCache
from career_fair.directory.session import DirectorySession

__all__ = [
    'Company',
    'Major',
    'Room',
    'CompanyKey',
    'MajorKey',
    'KeyedLookup',
    'InvalidKeySelectorError',
    'build_company_lookup',
    'build_major_lookup',
    'LookupMaps',
    'LookupMapsBuilder',
    'build_lookup_maps',
    'LastResultCache',
    'DirectorySession',
]

"""
Tests for record types, keyed lookups, blank matching and lookup map grouping
"""

import pandas as pd
import pytest

from career_fair.directory.cache import LastResultCache, is_blank_match
from career_fair.directory.keyed import (
    InvalidKeySelectorError,
    build_company_lookup,
    build_major_lookup,
    resolve_key,
)
from career_fair.directory.lookup_maps import LookupMaps, group_by_company
from career_fair.directory.models import Company, CompanyKey, Major, MajorKey
from career_fair.utils.logger import get_logger, setup_logger


@pytest.fixture
def companies():
    return [
        Company("Acme", "https://acme.example.com", "12", "Wood", [Major("Computer Science", "CS")]),
        Company("Bolt", "https://bolt.example.com", "3", "Hall", positions=["Co-op"]),
    ]


class TestCompany:

    def test_defaults_are_empty_lists(self):
        company = Company("Acme")
        assert company.majors == []
        assert company.positions == []
        assert company.work_auths == []
        # Default lists are not shared between records
        assert company.majors is not Company("Bolt").majors

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Company("")

    def test_null_columns_normalized(self):
        company = Company("Acme", website=None, table_num=7, room=None)
        assert company.website == ""
        assert company.table_num == "7"
        assert company.room == ""

    def test_major_equality_by_name_and_abbreviation(self):
        assert Major("Computer Science", "CS") == Major("Computer Science", "CS")
        assert Major("Computer Science", "CS") != Major("Computer Science", "CSC")
        assert len({Major("Chemistry", "CHEM"), Major("Chemistry", "CHEM")}) == 1


class TestKeyedLookup:

    @pytest.mark.parametrize("key, expected", [
        (CompanyKey.NAME, CompanyKey.NAME),
        ("table_num", CompanyKey.TABLE_NUMBER),
        (0, CompanyKey.NAME),
        (1, CompanyKey.TABLE_NUMBER),
        (2, None),
        (-1, None),
        (True, None),
        ("address", None),
        (None, None),
    ])
    def test_resolve_company_key(self, key, expected):
        assert resolve_key(key, CompanyKey) is expected

    def test_company_lookup_by_name(self, companies):
        mapping = build_company_lookup(companies, CompanyKey.NAME).unwrap()
        assert list(mapping) == ["Acme", "Bolt"]

    def test_company_lookup_by_table(self, companies):
        mapping = build_company_lookup(companies, 1).unwrap()
        assert mapping["3"].name == "Bolt"

    def test_invalid_selector_is_an_error_not_empty_mapping(self, companies):
        result = build_company_lookup(companies, 5)
        assert not result.ok
        assert isinstance(result.error, InvalidKeySelectorError)
        assert "name" in str(result.error)
        with pytest.raises(InvalidKeySelectorError):
            result.unwrap()

    def test_empty_input_is_a_valid_empty_mapping(self):
        result = build_company_lookup([], CompanyKey.NAME)
        assert result.ok
        assert result.unwrap() == {}

    def test_major_lookup(self):
        majors = [Major("Computer Science", "CS"), Major("Chemistry", "CHEM")]
        assert set(build_major_lookup(majors, MajorKey.NAME).unwrap()) == {"Computer Science", "Chemistry"}
        assert set(build_major_lookup(majors, 1).unwrap()) == {"CS", "CHEM"}
        assert not build_major_lookup(majors, "table_num").ok


class TestBlankMatching:

    def test_only_active_dimensions_count(self):
        company = Company("Acme", majors=[Major("Computer Science", "CS")])
        assert not is_blank_match(company, True, False, False)
        assert is_blank_match(company, True, True, False)
        assert is_blank_match(company, False, False, True)
        assert not is_blank_match(company, False, False, False)

    def test_cache_partitions(self, companies):
        cache = LastResultCache()
        assert cache.filtered_names() is None
        assert not cache.has_filtered

        cache.store_filter(companies, positions_active=True)
        assert cache.filtered_names() == ["Acme", "Bolt"]
        assert cache.filtered_names_partition(True) == ["Acme"]
        assert cache.filtered_names_partition(False) == ["Bolt"]
        assert cache.filtered_partitions() == (["Acme"], ["Bolt"])

        cache.store_filter([])
        assert cache.filtered_names() == []
        assert cache.filtered_companies_partition(True) == []

    def test_cache_keeps_its_own_records(self, companies):
        cache = LastResultCache()
        cache.store_filter(companies)
        companies[0].majors.clear()
        assert cache.filtered_companies_partition(False)[0].majors == [Major("Computer Science", "CS")]


class TestLookupMaps:

    def test_group_by_company_keeps_row_order(self):
        df = pd.DataFrame({
            "company_name": ["Bolt", "Acme", "Bolt", "Acme"],
            "position": ["Co-op", "Internship", "Full-time", "Co-op"],
        })
        grouped = group_by_company(df, lambda row: row.position)
        assert list(grouped) == ["Bolt", "Acme"]
        assert grouped["Bolt"] == ["Co-op", "Full-time"]
        assert grouped["Acme"] == ["Internship", "Co-op"]

    def test_group_by_company_empty(self):
        assert group_by_company(pd.DataFrame(columns=["company_name", "position"]), lambda row: row) == {}

    def test_accessors_copy(self):
        maps = LookupMaps(positions={"Acme": ["Co-op"]})
        maps.positions_for("Acme").append("Internship")
        assert maps.positions_for("Acme") == ["Co-op"]
        assert maps.majors_for("Acme") == []


class TestLogger:

    def test_get_logger_namespace(self):
        assert get_logger("directory.session").name == "career_fair.directory.session"

    def test_setup_logger_does_not_duplicate_handlers(self):
        logger = setup_logger("career_fair_test", log_to_file=False, level="DEBUG")
        again = setup_logger("career_fair_test", log_to_file=False)
        assert logger is again
        assert len(again.handlers) == 1

"""
Shared fixtures: a small career fair database on disk.
"""

import os
import sys
import sqlite3

import pytest

# Add project root to path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
sys.path.insert(0, PROJECT_ROOT)

from career_fair.directory import DirectorySession

SCHEMA = """
CREATE TABLE company (_id INTEGER PRIMARY KEY, name TEXT NOT NULL, website TEXT);
CREATE TABLE room (_id INTEGER PRIMARY KEY, name TEXT NOT NULL);
CREATE TABLE location (_id INTEGER PRIMARY KEY, tableNum TEXT, roomID INTEGER);
CREATE TABLE major (_id INTEGER PRIMARY KEY, name TEXT, abbreviation TEXT);
CREATE TABLE workAuth (_id INTEGER PRIMARY KEY, type TEXT);
CREATE TABLE employmentType (_id INTEGER PRIMARY KEY, type TEXT);
CREATE TABLE companyToLocation (companyID INTEGER, locationID INTEGER);
CREATE TABLE companyToMajor (companyID INTEGER, majorID INTEGER);
CREATE TABLE companyToWorkAuth (companyID INTEGER, workAuthID INTEGER);
CREATE TABLE companyToType (companyID INTEGER, typeID INTEGER);
"""

ROOMS = [(1, "Wood"), (2, "Multipurpose"), (3, "Hall")]

COMPANIES = [
    (1, "The Acme Co.", "https://acme.example.com"),
    (2, "Bolt Inc", "https://bolt.example.com"),
    (3, "acme Tools", "https://acmetools.example.com"),
    (4, "O'Reilly Media", "https://oreilly.example.com"),
    (5, "Zeta_Labs", None),
]

# (location id, table number, room id); location id == company id
LOCATIONS = [(1, "12", 1), (2, "3", 2), (3, "7", 1), (4, "1", 3), (5, "20", 2)]

MAJORS = [
    (1, "Computer Science", "CS"),
    (2, "Electrical Engineering", "EE"),
    (3, "Mechanical Engineering", "ME"),
    (4, "All Majors", "ALL"),
    (5, "Chemistry", "CHEM"),
]

WORK_AUTHS = [(1, ""), (2, "US Citizen"), (3, "Permanent Resident"), (4, "Visa Sponsorship")]

POSITIONS = [(1, ""), (2, "Full-time"), (3, "Internship"), (4, "Co-op")]

COMPANY_MAJORS = [(1, 2), (1, 1), (2, 3), (3, 4), (4, 1)]
COMPANY_WORK_AUTHS = [(1, 2), (2, 1), (3, 2), (3, 4), (4, 3)]
COMPANY_POSITIONS = [(1, 2), (1, 3), (2, 4), (3, 1), (4, 3)]

# Display order of COMPANIES
SORTED_NAMES = ["The Acme Co.", "acme Tools", "Bolt Inc", "O'Reilly Media", "Zeta_Labs"]


def create_directory_db(path):
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA)
        conn.executemany("INSERT INTO room VALUES (?, ?)", ROOMS)
        conn.executemany("INSERT INTO company VALUES (?, ?, ?)", COMPANIES)
        conn.executemany("INSERT INTO location VALUES (?, ?, ?)", LOCATIONS)
        conn.executemany("INSERT INTO companyToLocation VALUES (?, ?)", [(i, i) for i, _, _ in LOCATIONS])
        conn.executemany("INSERT INTO major VALUES (?, ?, ?)", MAJORS)
        conn.executemany("INSERT INTO workAuth VALUES (?, ?)", WORK_AUTHS)
        conn.executemany("INSERT INTO employmentType VALUES (?, ?)", POSITIONS)
        conn.executemany("INSERT INTO companyToMajor VALUES (?, ?)", COMPANY_MAJORS)
        conn.executemany("INSERT INTO companyToWorkAuth VALUES (?, ?)", COMPANY_WORK_AUTHS)
        conn.executemany("INSERT INTO companyToType VALUES (?, ?)", COMPANY_POSITIONS)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def directory_db(tmp_path):
    """Path to a populated career fair database"""
    return create_directory_db(tmp_path / "careerFairDB.db")


@pytest.fixture
def session(directory_db):
    """DirectorySession over the test database"""
    with DirectorySession(str(directory_db)) as s:
        yield s

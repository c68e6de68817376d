"""Tests for domain/model/organization.py."""

import pytest

from rosterfilter.domain.model.enums import GroupCategory
from rosterfilter.domain.model.organization import Department, Group, Team


class TestDepartment:
    """Tests for Department."""

    def test_valid(self) -> None:
        department = Department(id="d1", name="Engineering", lead="Ben Weber")
        assert department.description == ""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            Department(id="d1", name="", lead="Ben Weber")


class TestTeam:
    """Tests for Team."""

    def test_valid(self) -> None:
        team = Team(id="t1", name="Platform", lead="Clara Fischer", department="Engineering")
        assert team.department == "Engineering"

    def test_empty_id_raises(self) -> None:
        with pytest.raises(ValueError, match="id must not be empty"):
            Team(id="", name="Platform", lead="Clara Fischer", department="Engineering")


class TestGroup:
    """Tests for Group."""

    def test_member_count(self) -> None:
        group = Group(id="g1", name="Guild", category=GroupCategory.PROJECT, members=("p1", "p2"))
        assert group.member_count == 2

    def test_defaults(self) -> None:
        group = Group(id="g1", name="Guild", category=GroupCategory.PROJECT)
        assert group.member_count == 0
        assert group.is_active is True
        assert group.created_date is None

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            Group(id="g1", name="", category=GroupCategory.PROJECT)

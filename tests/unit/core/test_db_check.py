"""Tests for the database report and schema helpers."""

from unittest.mock import Mock

from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from catalog_demo.core.services import DbManageService, inspect_database
from catalog_demo.entities import ProductRepository


class TestInspectDatabase:
    def test_lists_tables_and_users(self, session, registered_user):
        report = inspect_database(session)

        assert report.connected is True
        assert {"user", "account", "session", "products"} <= set(report.tables)
        assert report.users == [(registered_user.auth_session.user.id, "Ada Lovelace")]

    def test_no_users(self, session):
        assert inspect_database(session).users == []

    def test_errors_are_reported(self):
        """A failing connection is described on the report instead of raised."""
        session = Mock()
        session.get_bind.return_value.dialect.name = "postgresql"
        session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("connection refused")
        )

        report = inspect_database(session)

        assert report.connected is False
        assert "connection refused" in report.error
        assert report.tables == []


class TestDbManageService:
    def test_recreate_products_empties_the_table(self, engine, seeded_session):
        seeded_session.close()

        DbManageService(engine).recreate_products()

        with Session(engine) as fresh:
            assert ProductRepository(fresh).count() == 0

    def test_create_all_is_idempotent(self, engine):
        DbManageService(engine).create_all()

        with Session(engine) as fresh:
            assert ProductRepository(fresh).count() == 0

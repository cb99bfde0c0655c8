"""Tests for the product-store command line interface."""

from decimal import Decimal

import pytest
from typer.testing import CliRunner

from src.product_store.cli import app
from src.product_store.core.services import DbSessionService
from src.product_store.entities.product import Category, Product, SqlProductRepository
from src.product_store.runtime.config.config_data import ConfigData
from src.product_store.runtime.context import with_context

runner = CliRunner()


@pytest.fixture
def file_database(tmp_path):
    """Point the application config at a throwaway SQLite file."""
    config = ConfigData()
    config.database.url = f"sqlite:///{tmp_path / 'cli.db'}"
    with with_context(config):
        yield


def _seed() -> None:
    database_service = DbSessionService()
    with database_service.session_scope() as session:
        repository = SqlProductRepository(session)
        repository.save(
            Product(name="Hat", description="Red hat", price=Decimal("9.99"),
                    available=True, category=Category.CLOTHS)
        )
        repository.save(
            Product(name="Apple", description="Green apple", price=Decimal("0.50"),
                    available=False, category=Category.FOOD)
        )
    database_service.dispose()


def test_init_db_creates_tables(file_database):
    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0
    assert "Database tables created" in result.output


def test_list_prints_products(file_database):
    runner.invoke(app, ["init-db"])
    _seed()

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Hat" in result.output
    assert "Apple" in result.output


def test_list_applies_category_filter(file_database):
    runner.invoke(app, ["init-db"])
    _seed()

    result = runner.invoke(app, ["list", "--category", "food"])

    assert result.exit_code == 0
    assert "Apple" in result.output
    assert "Hat" not in result.output


def test_list_reports_empty_catalog(file_database):
    runner.invoke(app, ["init-db"])

    result = runner.invoke(app, ["list", "--name", "Spaceship"])

    assert result.exit_code == 0
    assert "No products found" in result.output


def test_list_on_fresh_database(file_database):
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "No products found" in result.output

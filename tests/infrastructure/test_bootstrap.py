"""Tests for the composition root: storage location and first-run seeding."""

from donutpos.domain.model.menu_item import MenuItem
from donutpos.domain.model.value_objects import Money
from donutpos.infrastructure import bootstrap


class TestDatabaseUrl:

    def test_env_var_with_url_is_used_verbatim(self, monkeypatch):
        monkeypatch.setenv(bootstrap.DB_ENV_VAR, "sqlite://")
        assert bootstrap.database_url() == "sqlite://"

    def test_env_var_with_path_creates_parent(self, monkeypatch, tmp_path):
        target = tmp_path / "nested" / "shop.db"
        monkeypatch.setenv(bootstrap.DB_ENV_VAR, str(target))
        assert bootstrap.database_url() == f"sqlite:///{target}"
        assert target.parent.is_dir()


class TestOpenDatabase:

    def test_first_run_seeds_sample_items(self):
        database = bootstrap.open_database("sqlite://")
        try:
            items = bootstrap.menu_item_repository(database).list_all()
            assert [(i.name, str(i.price)) for i in items] == [
                ("Glazed Donut", "$1.50"),
                ("Chocolate Frosted", "$1.75"),
                ("Sprinkles", "$1.85"),
            ]
        finally:
            database.close()

    def test_reopening_does_not_seed_again(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'shop.db'}"
        bootstrap.open_database(url).close()

        database = bootstrap.open_database(url)
        try:
            assert len(bootstrap.menu_item_repository(database).list_all()) == 3
        finally:
            database.close()

    def test_emptied_catalog_stays_empty_after_reopening(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'shop.db'}"
        database = bootstrap.open_database(url)
        repo = bootstrap.menu_item_repository(database)
        for item in repo.list_all():
            repo.delete(item.id)
        database.close()

        database = bootstrap.open_database(url)
        try:
            assert bootstrap.menu_item_repository(database).list_all() == []
        finally:
            database.close()

    def test_deleted_ids_are_not_handed_out_again(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'shop.db'}"
        database = bootstrap.open_database(url)
        repo = bootstrap.menu_item_repository(database)
        old_ids = {item.id for item in repo.list_all()}
        for item_id in old_ids:
            repo.delete(item_id)
        database.close()

        database = bootstrap.open_database(url)
        try:
            item = MenuItem(name="Cruller", price=Money.of("2.10"))
            bootstrap.menu_item_repository(database).insert(item)
            assert item.id not in old_ids
            assert item.id > max(old_ids)
        finally:
            database.close()

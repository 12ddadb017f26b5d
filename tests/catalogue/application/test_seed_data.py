"""Application tests for demo data seeding."""

from quickbite.catalogue.browsing import list_menu_items
from quickbite.identity.registration import find_user_by_username
from quickbite.seed import MENU, seed_demo_data


class TestSeedDemoData:
    def test_seeds_admin_and_menu(self):
        assert seed_demo_data() is True

        admin = find_user_by_username("admin")
        assert admin.is_admin is True
        assert admin.email == "admin@quickbite.com"
        assert admin.check_password("admin_password")

        items = list_menu_items()
        assert len(items) == len(MENU) == 8
        assert [item.id for item in items] == list(range(1, 9))

    def test_seeded_item_details(self):
        seed_demo_data()

        pizza = list_menu_items(search="Pepperoni")[0]
        assert pizza.price == 12.99
        assert pizza.is_popular is True
        assert pizza.dietary_tags() == ["vegetarian"]
        assert pizza.nutrition()["calories"] == 850
        assert pizza.nutrition()["allergens"] == ["dairy", "gluten"]

    def test_popular_items(self):
        seed_demo_data()
        assert {item.name for item in list_menu_items() if item.is_popular} == {
            "Pepperoni Pizza",
            "Deluxe Burger",
            "Salmon Sushi Roll",
            "Pasta Carbonara",
        }

    def test_admin_password_from_settings(self, settings):
        settings(seed_admin_password="changed")
        seed_demo_data()
        assert find_user_by_username("admin").check_password("changed")

    def test_second_run_is_a_no_op(self):
        seed_demo_data()
        assert seed_demo_data() is False
        assert len(list_menu_items()) == 8

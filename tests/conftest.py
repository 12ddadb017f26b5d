import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_configure(config):
    """Select the config overlay before the domain module is imported anywhere."""
    os.environ["PROTEAN_ENV"] = config.getoption("--env")
    os.environ.setdefault("SEED_DATA", "false")
    os.environ.setdefault("PAYMENT_GATEWAY", "fake")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def quickbite_bed():
    from protean.integrations.pytest import DomainFixture
    from quickbite.domain import quickbite

    bed = DomainFixture(quickbite)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(quickbite_bed):
    """Run every test inside the domain context and leave a clean store behind."""
    from quickbite.config import reset_settings
    from quickbite.payments.gateway import reset_gateway

    with quickbite_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_settings()
    reset_gateway()


@pytest.fixture()
def settings():
    """Override application settings for one test: ``settings(total_policy=...)``."""
    from quickbite.config import override_settings

    return override_settings


@pytest.fixture()
def fake_gateway():
    from quickbite.payments.gateway import set_gateway
    from quickbite.payments.gateway.fake_adapter import FakeGateway

    gateway = FakeGateway()
    set_gateway(gateway)
    return gateway


@pytest.fixture()
def make_menu_item():
    """Create a menu item through the command handler and return its id."""
    from protean import current_domain
    from quickbite.catalogue.management import CreateMenuItem

    def _make(name="Pepperoni Pizza", price=12.99, category="Pizza", **overrides):
        defaults = {
            "name": name,
            "description": f"{name}, freshly made",
            "price": price,
            "category": category,
        }
        defaults.update(overrides)
        return current_domain.process(CreateMenuItem(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def make_user():
    """Register a user through the command handler and return its id."""
    from protean import current_domain
    from quickbite.identity.registration import RegisterUser

    def _make(username="jane", password="s3cret", is_admin=False, **overrides):
        command = RegisterUser(username=username, password=password, is_admin=is_admin, **overrides)
        return current_domain.process(command, asynchronous=False)

    return _make

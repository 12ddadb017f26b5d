"""Schema management for SQL-backed database providers."""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    return [provider for provider in domain.providers.values() if provider.conn_info["provider"] in SQL_PROVIDERS]


def setup_db(domain: Domain) -> int:
    """Create tables for every aggregate and entity. Returns the number of SQL providers touched."""
    with domain.domain_context():
        providers = _sql_providers(domain)
        for provider in providers:
            engine = create_engine(provider.conn_info["database_uri"])

            # Building a DAO registers the model's table on the provider metadata
            for registry in (domain.registry.aggregates, domain.registry.entities):
                for _, record in registry.items():
                    if record.cls.meta_.provider == provider.name:
                        domain.repository_for(record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)
        return len(providers)


def drop_db(domain: Domain) -> int:
    """Drop every table known to the SQL providers."""
    with domain.domain_context():
        providers = _sql_providers(domain)
        for provider in providers:
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
        return len(providers)

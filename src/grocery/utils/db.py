"""Schema management for relational providers.

The memory provider used in development and tests has no schema, so both
functions are no-ops unless ``domain.toml`` selects SQLite or PostgreSQL.
"""

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    return [provider for _, provider in domain.providers.items() if provider.conn_info["provider"] in _SQL_PROVIDERS]


def _register_models(domain: Domain, provider) -> None:
    # Models are registered with the provider's metadata lazily, on first DAO access
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for every aggregate and entity stored in a SQL provider."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _register_models(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))
            logger.info("tables_created", provider=provider.name, tables=sorted(provider._metadata.tables))


def drop_db(domain: Domain) -> None:
    with domain.domain_context():
        for provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
            logger.info("tables_dropped", provider=provider.name)

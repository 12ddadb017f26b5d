"""Entity store: per-type CRUD over Protean repositories.

Every entity type gets integer identifiers from its own counter, starting at
1. Counters are ordinary aggregates, so they live in whichever database
provider ``domain.toml`` selects, next to the entities they number.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain
from protean.utils.reflection import id_field

from quickbite.domain import quickbite

# Rows fetched per round trip when reading a whole result set.
PAGE_SIZE = 500


@quickbite.aggregate
class Sequence:
    """Identifier counter for one entity type."""

    name = String(identifier=True, max_length=50)
    value = Integer(default=0)

    def advance(self):
        self.value = (self.value or 0) + 1
        return self.value


def next_id(entity_name: str) -> int:
    """Reserve the next identifier for ``entity_name``."""
    repo = current_domain.repository_for(Sequence)
    try:
        sequence = repo.get(entity_name)
    except ObjectNotFoundError:
        sequence = Sequence(name=entity_name, value=0)

    identifier = sequence.advance()
    repo.add(sequence)
    return identifier


def fetch(aggregate_cls, identifier):
    """Load one aggregate. Raises ``ObjectNotFoundError`` when absent."""
    return current_domain.repository_for(aggregate_cls).get(identifier)


def save(aggregate):
    current_domain.repository_for(type(aggregate)).add(aggregate)
    return aggregate


def delete(aggregate) -> None:
    current_domain.repository_for(type(aggregate))._dao.delete(aggregate)


def find_by(aggregate_cls, **filters) -> list:
    """Query aggregates by field lookups such as ``user_id=1`` or ``id__in=[1, 2]``.

    No filters returns everything. Results come back in identifier order and
    are read page by page, so large tables are never cut short.
    """
    query = current_domain.repository_for(aggregate_cls)._dao.query
    if filters:
        query = query.filter(**filters)
    query = query.order_by(id_field(aggregate_cls).field_name)

    results = []
    offset = 0
    while True:
        page = query.offset(offset).limit(PAGE_SIZE).all().items
        results.extend(page)
        if len(page) < PAGE_SIZE:
            return results
        offset += PAGE_SIZE


def find_one_by(aggregate_cls, **filters):
    """Return the first aggregate matching ``filters``, or None."""
    results = find_by(aggregate_cls, **filters)
    return results[0] if results else None

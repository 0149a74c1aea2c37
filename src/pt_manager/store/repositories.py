"""In-memory stores for customers and training sessions.

Each store owns an immutable tuple snapshot. Mutations build a new tuple and
swap it in, so a snapshot handed out earlier never changes underneath its
reader.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from ..data.mock_data import generate_id
from ..errors import ValidationError
from ..models.customer import Customer
from ..models.training import TrainingSession

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Customer, TrainingSession)

Confirm = Callable[[], bool]


class _SnapshotStore(Generic[RecordT]):
    """Shared snapshot handling for the record stores."""

    entity = "record"

    def __init__(self, records: Iterable[RecordT] = ()):
        self._snapshot: tuple[RecordT, ...] = ()
        for record in records:
            self._append(record)
        logger.debug("Loaded %d %s record(s)", len(self._snapshot), self.entity)

    def __len__(self) -> int:
        return len(self._snapshot)

    def list_all(self) -> tuple[RecordT, ...]:
        """Return the current snapshot."""
        return self._snapshot

    def get(self, record_id: str) -> RecordT | None:
        """Get a record by ID."""
        for record in self._snapshot:
            if record.id == record_id:
                return record
        return None

    def add(self, record: RecordT) -> tuple[RecordT, ...]:
        """Append a new record, assigning an ID if it has none."""
        record = self._append(record)
        logger.info("Added %s %s", self.entity, record.id)
        return self._snapshot

    def _append(self, record: RecordT) -> RecordT:
        if not record.id:
            record = dataclasses.replace(record, id=generate_id())
        record.validate()
        if self.get(record.id) is not None:
            raise ValidationError(f"{self.entity.capitalize()} ID {record.id} already exists")

        self._snapshot = self._snapshot + (record,)
        return record

    def delete(self, record_id: str, confirm: Confirm | None = None) -> tuple[RecordT, ...]:
        """Remove a record.

        If confirm is given and returns False, nothing changes. Deleting an
        unknown ID is a no-op.
        """
        if self.get(record_id) is None:
            logger.debug("Delete of unknown %s %s ignored", self.entity, record_id)
            return self._snapshot

        if confirm is not None and not confirm():
            logger.debug("Delete of %s %s cancelled", self.entity, record_id)
            return self._snapshot

        self._snapshot = tuple(r for r in self._snapshot if r.id != record_id)
        logger.info("Deleted %s %s", self.entity, record_id)
        return self._snapshot


class CustomerStore(_SnapshotStore[Customer]):
    """Store for customers."""

    entity = "customer"

    def update(self, customer: Customer) -> tuple[Customer, ...]:
        """Replace the customer with the same ID, keeping its position."""
        customer.validate()
        if self.get(customer.id) is None:
            logger.debug("Update of unknown customer %s ignored", customer.id)
            return self._snapshot

        self._snapshot = tuple(
            customer if existing.id == customer.id else existing
            for existing in self._snapshot
        )
        logger.info("Updated customer %s", customer.id)
        return self._snapshot


class TrainingStore(_SnapshotStore[TrainingSession]):
    """Store for training sessions. Sessions are added or deleted, never edited."""

    entity = "training session"

# pantry/reconciler.py
"""
Optimistic item list for one shelf.

Items the user has just added (predicted) are shown alongside the items the
server has confirmed, as one list sorted by name. Predictions are dropped as
soon as a new confirmed snapshot is observed.

Known limitation: *any* new snapshot drops *all* predictions, even when the
refresh was caused by something else (a rename, another item's deletion)
and the create request is still in flight. The prediction then disappears
until the real item arrives. A create request that fails also makes its
prediction vanish. There is no timeout, acknowledgement or rollback.
"""

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


def create_item_id() -> str:
    # Only has to be unique among the predictions of one shelf view.
    return str(round(random.random() * 1_000_000))


@dataclass(frozen=True)
class RenderedItem:
    id: str
    name: str
    is_optimistic: bool = False


@dataclass(frozen=True)
class ConfirmedSnapshot:
    """Items confirmed by the server, tagged with the version they were loaded at."""

    version: int
    items: Tuple[RenderedItem, ...] = ()

    @classmethod
    def of(cls, version: int, items: Iterable) -> "ConfirmedSnapshot":
        """Build a snapshot from anything with ``id`` and ``name`` attributes."""
        return cls(
            version=version,
            items=tuple(RenderedItem(id=item.id, name=item.name) for item in items),
        )


class ReconcilerState(enum.Enum):
    STABLE = "stable"  # no predictions outstanding
    PENDING = "pending"


@dataclass
class OptimisticItems:
    """
    Merges predicted items with the last confirmed snapshot.

    Call ``add_predicted`` when the user submits a new item, ``observe`` (or
    ``replace_snapshot``) whenever fresh server data arrives, and
    ``merged_view`` to get the list to display.
    """

    snapshot: ConfirmedSnapshot = field(default_factory=lambda: ConfirmedSnapshot(version=0))
    id_factory: Callable[[], str] = create_item_id
    _predicted: List[RenderedItem] = field(default_factory=list, init=False, repr=False)

    @property
    def state(self) -> ReconcilerState:
        return ReconcilerState.PENDING if self._predicted else ReconcilerState.STABLE

    @property
    def predicted(self) -> List[RenderedItem]:
        return list(self._predicted)

    @property
    def confirmed(self) -> List[RenderedItem]:
        return list(self.snapshot.items)

    def add_predicted(self, name: str) -> None:
        self._predicted.append(
            RenderedItem(id=self.id_factory(), name=name, is_optimistic=True)
        )

    def observe(self, snapshot: ConfirmedSnapshot) -> None:
        """Take a snapshot; a different version clears every prediction."""
        if snapshot.version == self.snapshot.version:
            return

        if self._predicted:
            logger.debug(
                "Snapshot v%d replaces v%d, dropping %d predicted item(s)",
                snapshot.version,
                self.snapshot.version,
                len(self._predicted),
            )
        self.snapshot = snapshot
        self._predicted = []

    def replace_snapshot(self, items: Iterable, version: Optional[int] = None) -> ConfirmedSnapshot:
        """
        Observe ``items`` as a new snapshot. Without an explicit ``version``
        the next one is used, so value-equal items still count as a change.
        """
        if version is None:
            version = self.snapshot.version + 1
        snapshot = ConfirmedSnapshot.of(version, items)
        self.observe(snapshot)
        return snapshot

    def merged_view(self) -> List[RenderedItem]:
        # sorted() is stable: equal names keep predicted-before-confirmed order
        return sorted(
            [*self._predicted, *self.snapshot.items],
            key=lambda item: item.name,
        )

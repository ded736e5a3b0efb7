"""In-memory implementation of ExpenseStore.

Records live in a plain list for the lifetime of the process. The
repository satisfies the ExpenseStore protocol through structural typing.
"""

import logging
import threading

from expense_api.config import ID_STRATEGIES, settings
from expense_api.entities import ExpenseEntity

logger = logging.getLogger(__name__)

SAMPLE_EXPENSES: tuple[ExpenseEntity, ...] = (
    ExpenseEntity(id=1, description="Groceries", amount=75.50, category="Food", date="2024-01-15"),
    ExpenseEntity(id=2, description="Gasoline", amount=45.00, category="Transport", date="2024-01-14"),
    ExpenseEntity(
        id=3,
        description="Netflix Subscription",
        amount=15.99,
        category="Entertainment",
        date="2024-01-10",
    ),
)


class InMemoryExpenseRepository:
    """Process-local expense store.

    A single lock serializes every read and write, so id assignment
    and removal stay atomic under a concurrent ASGI server.

    Identifier strategies:
    - ``max_plus_one``: highest live id + 1, or 1 when empty
    - ``monotonic``: a counter that never goes backwards, even across deletes
    """

    def __init__(
        self,
        seed: bool | None = None,
        id_strategy: str | None = None,
        initial: list[ExpenseEntity] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            seed: Load the sample records. Defaults to settings.
            id_strategy: ``max_plus_one`` or ``monotonic``. Defaults to settings.
            initial: Explicit starting records, used instead of the samples.
        """
        strategy = id_strategy or settings.id_strategy
        if strategy not in ID_STRATEGIES:
            raise ValueError(f"Unknown id strategy: {strategy!r}")

        self._strategy = strategy
        self._lock = threading.Lock()

        if initial is not None:
            self._expenses = list(initial)
        elif settings.seed_samples if seed is None else seed:
            self._expenses = list(SAMPLE_EXPENSES)
        else:
            self._expenses = []

        ids = [expense.id for expense in self._expenses]
        if len(ids) != len(set(ids)):
            raise ValueError("Initial expenses contain duplicate ids")
        self._last_id = max(ids, default=0)

    @classmethod
    def create(
        cls,
        seed: bool | None = None,
        id_strategy: str | None = None,
    ) -> "InMemoryExpenseRepository":
        """Factory method to create InMemoryExpenseRepository with defaults.

        Args:
            seed: Load the sample records. If None, uses settings.
            id_strategy: Identifier strategy. If None, uses settings.

        Returns:
            Configured InMemoryExpenseRepository
        """
        return cls(seed=seed, id_strategy=id_strategy)

    def _next_id(self) -> int:
        # caller holds the lock
        if self._strategy == "monotonic":
            self._last_id += 1
            return self._last_id
        return max((expense.id for expense in self._expenses), default=0) + 1

    def list_all(self) -> list[ExpenseEntity]:
        with self._lock:
            return list(self._expenses)

    def add(
        self,
        description: str,
        amount: float,
        category: str,
        date: str,
    ) -> ExpenseEntity:
        with self._lock:
            expense = ExpenseEntity(
                id=self._next_id(),
                description=description,
                amount=amount,
                category=category,
                date=date,
            )
            self._expenses.append(expense)

        logger.debug("Stored expense %d", expense.id)
        return expense

    def delete_by_id(self, expense_id: int | None) -> int:
        if expense_id is None:
            return 0

        with self._lock:
            before = len(self._expenses)
            self._expenses = [e for e in self._expenses if e.id != expense_id]
            removed = before - len(self._expenses)

        logger.debug("Removed %d record(s) with id %s", removed, expense_id)
        return removed

    def count_all(self) -> int:
        with self._lock:
            return len(self._expenses)

    def health_check(self) -> bool:
        return True

    @property
    def id_strategy(self) -> str:
        """Get the identifier strategy in use."""
        return self._strategy

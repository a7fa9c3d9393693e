"""
Interaction recorder: fire-and-forget execution of interaction plans.

record() computes the plan synchronously, submits the store writes as one
task on a background ThreadPoolExecutor, and returns the Future at once.
Write failures are logged and passed to the on_failure callback; they never
propagate to the caller. There is no retry: delivery is at most once.

Preference updates are read-modify-write with no locking, so two concurrent
updates for the same viewer can lose one of the writes (last write wins).
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from ..models.content import ContentItem
from ..models.interaction import InteractionKind
from ..models.preferences import PreferenceModel
from ..store import FeedStore
from .transitions import InteractionPlan, apply_plan, plan_interaction

logger = logging.getLogger(__name__)

# Called with (step, plan, exception) for each failed write.
FailureCallback = Callable[[str, InteractionPlan, BaseException], None]


class InteractionRecorder:
    """Runs interaction writes on a background executor."""

    def __init__(
        self,
        store: FeedStore,
        max_workers: int = 4,
        on_failure: Optional[FailureCallback] = None,
    ):
        self._store = store
        self._on_failure = on_failure
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="feedrank-interactions"
        )

    def record(
        self,
        user_id: str,
        item: ContentItem,
        kind: InteractionKind,
    ) -> "Future[bool]":
        """
        Enqueue the writes for one interaction and return immediately.

        The returned future resolves to True when every write succeeded and
        False otherwise; it never raises.
        """
        plan = plan_interaction(user_id, item, kind)
        try:
            return self._executor.submit(self.execute, plan)
        except RuntimeError as e:
            # Executor already shut down.
            self._report_failure("submit", plan, e)
            future: "Future[bool]" = Future()
            future.set_result(False)
            return future

    def execute(self, plan: InteractionPlan) -> bool:
        """Run all writes for plan; each step fails independently of the others."""
        failures: List[str] = []
        interaction = plan.interaction

        if not self._run_step("insert_interaction", plan, lambda: self._store.insert_interaction(interaction)):
            failures.append("insert_interaction")

        if plan.counter_field is not None:
            field = plan.counter_field
            ok = self._run_step(
                "increment_counter",
                plan,
                lambda: self._store.increment_counter(interaction.content_id, field, 1),
            )
            if not ok:
                failures.append("increment_counter")

        if plan.touches_preferences:
            if not self._run_step("upsert_preferences", plan, lambda: self._update_preferences(plan)):
                failures.append("upsert_preferences")

        if failures:
            logger.info(
                "[preferences] interaction %s by %s on %s finished with failures: %s",
                interaction.kind.value, interaction.user_id, interaction.content_id, failures,
            )
        return not failures

    def _update_preferences(self, plan: InteractionPlan) -> None:
        user_id = plan.interaction.user_id
        # A failed read aborts the update rather than overwriting stored state with a partial model.
        current = self._store.query_preferences(user_id) or PreferenceModel()
        updated = apply_plan(current, plan)
        preferred_tags = updated.preferred_tags if updated.preferred_tags != current.preferred_tags else None
        muted_channels = updated.muted_channels if updated.muted_channels != current.muted_channels else None
        if preferred_tags is None and muted_channels is None:
            return
        self._store.upsert_preferences(
            user_id,
            preferred_tags=preferred_tags,
            muted_channels=muted_channels,
        )

    def _run_step(self, step: str, plan: InteractionPlan, action: Callable[[], None]) -> bool:
        try:
            action()
            return True
        except Exception as e:
            self._report_failure(step, plan, e)
            return False

    def _report_failure(self, step: str, plan: InteractionPlan, error: BaseException) -> None:
        logger.error(
            "[preferences] %s failed for user=%r content=%r kind=%s: %s",
            step,
            plan.interaction.user_id,
            plan.interaction.content_id,
            plan.interaction.kind.value,
            error,
        )
        if self._on_failure is not None:
            try:
                self._on_failure(step, plan, error)
            except Exception:
                logger.exception("[preferences] on_failure callback raised")

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

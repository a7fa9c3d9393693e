"""
Interaction transition rules: what each viewer action writes.

plan_interaction is pure: it maps (viewer, item, kind) to an InteractionPlan
naming the interaction to append, the counter to bump, the preference change
to merge, and whether the item is hidden for the session. The recorder
executes the plan against the store.

    view                  -> views += 1
    like                  -> likes += 1
    dislike               -> dislikes += 1
    hide                  -> session-local suppression only
    mute_channel          -> creator_id merged into muted_channels
    show_more_like_this   -> item tags merged into preferred_tags
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.content import ContentItem
from ..models.interaction import Interaction, InteractionKind
from ..models.preferences import PreferenceModel

_COUNTER_BY_KIND = {
    InteractionKind.VIEW: "views",
    InteractionKind.LIKE: "likes",
    InteractionKind.DISLIKE: "dislikes",
}


class InteractionPlan(BaseModel):
    """Writes implied by one interaction."""

    interaction: Interaction
    counter_field: Optional[str] = None
    add_preferred_tags: List[str] = Field(default_factory=list)
    mute_creator_id: Optional[str] = None
    hide: bool = False

    @property
    def touches_preferences(self) -> bool:
        return bool(self.add_preferred_tags) or self.mute_creator_id is not None


def plan_interaction(user_id: str, item: ContentItem, kind: InteractionKind) -> InteractionPlan:
    """Compute the plan for one interaction. Every kind appends to the log."""
    kind = InteractionKind(kind)
    plan = InteractionPlan(
        interaction=Interaction(user_id=user_id, content_id=item.id, kind=kind),
        counter_field=_COUNTER_BY_KIND.get(kind),
    )
    if kind is InteractionKind.MUTE_CHANNEL and item.creator_id:
        plan.mute_creator_id = item.creator_id
    elif kind is InteractionKind.SHOW_MORE_LIKE_THIS:
        plan.add_preferred_tags = list(item.tags)
    elif kind is InteractionKind.HIDE:
        plan.hide = True
    return plan


def apply_plan(preferences: PreferenceModel, plan: InteractionPlan) -> PreferenceModel:
    """Merge the plan's preference change into preferences (set union, idempotent)."""
    updated = preferences
    if plan.add_preferred_tags:
        updated = updated.with_tags(plan.add_preferred_tags)
    if plan.mute_creator_id is not None:
        updated = updated.with_muted(plan.mute_creator_id)
    return updated

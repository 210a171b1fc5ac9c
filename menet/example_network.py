"""Example "Healthy Living" network for new users.

Shows all three node types, both link valences, a range of reliability and
strength levels, and a behaviour (late-night gaming) whose only effects hurt
values.
"""

from menet.domain.base import now_iso
from menet.domain.network import (
    NETWORK_VERSION,
    Behaviour,
    BehaviourOutcomeLink,
    Network,
    Outcome,
    OutcomeValueLink,
    Value,
)

EXAMPLE_BEHAVIOUR_LABELS = [
    "Exercise regularly",
    "Meal prep on Sundays",
    "Meditate daily",
    "Stay up late gaming",
]


def create_example_network(timestamp: str | None = None) -> Network:
    ts = timestamp or now_iso()
    stamps = {"created_at": ts, "updated_at": ts}

    behaviours = [
        Behaviour(
            id="b-exercise",
            label="Exercise regularly",
            notes="Any form of physical activity: gym, running, cycling, etc.",
            frequency="weekly",
            cost="medium",
            context_tags=["morning", "health"],
            **stamps,
        ),
        Behaviour(
            id="b-meal-prep",
            label="Meal prep on Sundays",
            notes="Prepare healthy meals for the week ahead",
            frequency="weekly",
            cost="low",
            context_tags=["weekend", "health"],
            **stamps,
        ),
        Behaviour(
            id="b-meditate",
            label="Meditate daily",
            notes="10-15 minutes of mindfulness meditation",
            frequency="daily",
            cost="trivial",
            context_tags=["morning", "mental-health"],
            **stamps,
        ),
        Behaviour(
            id="b-gaming",
            label="Stay up late gaming",
            notes="Playing video games past midnight",
            frequency="weekly",
            cost="low",
            context_tags=["evening", "entertainment"],
            **stamps,
        ),
    ]

    outcomes = [
        Outcome(
            id="o-fitness",
            label="Better physical fitness",
            notes="Improved strength, endurance, and overall physical health",
            **stamps,
        ),
        Outcome(
            id="o-energy",
            label="More energy",
            notes="Feeling more energetic and alert throughout the day",
            **stamps,
        ),
        Outcome(
            id="o-stress",
            label="Reduced stress",
            notes="Lower anxiety levels and better emotional regulation",
            **stamps,
        ),
        Outcome(
            id="o-less-sleep",
            label="Less sleep",
            notes="Reduced quantity or quality of sleep",
            **stamps,
        ),
    ]

    values = [
        Value(
            id="v-health",
            label="Health",
            notes="Physical and mental wellbeing, longevity",
            importance="critical",
            neglect="somewhat-neglected",
            **stamps,
        ),
        Value(
            id="v-happiness",
            label="Happiness",
            notes="Emotional wellbeing, joy, life satisfaction",
            importance="high",
            neglect="adequately-met",
            **stamps,
        ),
        Value(
            id="v-productivity",
            label="Productivity",
            notes="Getting things done, achieving goals, making progress",
            importance="high",
            neglect="somewhat-neglected",
            **stamps,
        ),
    ]

    def bo(link_id, source_id, target_id, valence, reliability) -> BehaviourOutcomeLink:
        return BehaviourOutcomeLink(
            id=link_id,
            source_id=source_id,
            target_id=target_id,
            valence=valence,
            reliability=reliability,
            **stamps,
        )

    def ov(link_id, source_id, target_id, valence, strength) -> OutcomeValueLink:
        return OutcomeValueLink(
            id=link_id,
            source_id=source_id,
            target_id=target_id,
            valence=valence,
            strength=strength,
            **stamps,
        )

    links = [
        bo("l-exercise-fitness", "b-exercise", "o-fitness", "positive", "usually"),
        bo("l-exercise-energy", "b-exercise", "o-energy", "positive", "usually"),
        bo("l-meal-prep-fitness", "b-meal-prep", "o-fitness", "positive", "sometimes"),
        bo("l-meditate-stress", "b-meditate", "o-stress", "positive", "usually"),
        # positive valence here means "causes"
        bo("l-gaming-less-sleep", "b-gaming", "o-less-sleep", "positive", "always"),
        ov("l-fitness-health", "o-fitness", "v-health", "positive", "strong"),
        ov("l-energy-productivity", "o-energy", "v-productivity", "positive", "strong"),
        ov("l-energy-happiness", "o-energy", "v-happiness", "positive", "moderate"),
        ov("l-stress-happiness", "o-stress", "v-happiness", "positive", "strong"),
        ov("l-stress-health", "o-stress", "v-health", "positive", "moderate"),
        ov("l-less-sleep-health", "o-less-sleep", "v-health", "negative", "strong"),
        ov("l-less-sleep-productivity", "o-less-sleep", "v-productivity", "negative", "strong"),
    ]

    return Network(
        version=NETWORK_VERSION,
        behaviours=behaviours,
        outcomes=outcomes,
        values=values,
        links=links,
    )


def is_example_network(network: Network) -> bool:
    """Heuristic: at least 3 of the 4 example behaviour labels are present."""
    labels = {behaviour.label.lower() for behaviour in network.behaviours}
    return sum(label.lower() in labels for label in EXAMPLE_BEHAVIOUR_LABELS) >= 3

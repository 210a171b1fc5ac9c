"""Network domain models."""

from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field

from menet.domain.base import CamelModel, now_iso

NETWORK_VERSION = "1.0.0"

Frequency = Literal["daily", "weekly", "monthly", "occasionally", "rarely"]
Cost = Literal["trivial", "low", "medium", "high", "very-high"]
Importance = Literal["critical", "high", "medium", "low"]
Neglect = Literal["severely-neglected", "somewhat-neglected", "adequately-met", "well-satisfied"]
Reliability = Literal["always", "usually", "sometimes", "rarely"]
Strength = Literal["strong", "moderate", "weak"]
Valence = Literal["positive", "negative"]


class BaseNode(CamelModel):
    """Fields shared by every node.

    Attributes:
        id: Unique identifier across all node types
        label: Display label
        notes: Optional free text
        created_at: ISO 8601 creation timestamp
        updated_at: ISO 8601 last update timestamp
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str = Field(min_length=1)
    notes: str | None = None
    created_at: str = Field(default_factory=now_iso)
    updated_at: str = Field(default_factory=now_iso)


class Behaviour(BaseNode):
    """A recorded action or habit."""

    type: Literal["behaviour"] = "behaviour"
    frequency: Frequency
    cost: Cost
    context_tags: list[str] = []


class Outcome(BaseNode):
    """An effect produced by one or more behaviours."""

    type: Literal["outcome"] = "outcome"


class Value(BaseNode):
    """A terminal goal or principle."""

    type: Literal["value"] = "value"
    importance: Importance
    neglect: Neglect


class BaseLink(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    source_id: str = Field(min_length=1)
    target_id: str = Field(min_length=1)
    valence: Valence
    created_at: str = Field(default_factory=now_iso)
    updated_at: str = Field(default_factory=now_iso)


class BehaviourOutcomeLink(BaseLink):
    """Behaviour -> outcome edge, weighted by how reliably the outcome follows."""

    type: Literal["behaviour-outcome"] = "behaviour-outcome"
    reliability: Reliability


class OutcomeValueLink(BaseLink):
    """Outcome -> value edge, weighted by how strongly the outcome serves the value."""

    type: Literal["outcome-value"] = "outcome-value"
    strength: Strength


Link = Annotated[BehaviourOutcomeLink | OutcomeValueLink, Field(discriminator="type")]


class NetworkStats(BaseModel):
    behaviours: int
    outcomes: int
    values: int
    links: int


class Network(CamelModel):
    """An immutable snapshot of a means-ends network.

    Attributes:
        version: Data format version
        exported_at: Set when the network was written by an export
        behaviours: Behaviour nodes, in creation order
        outcomes: Outcome nodes, in creation order
        values: Value nodes, in creation order
        links: Behaviour-outcome and outcome-value links, in creation order
    """

    model_config = ConfigDict(frozen=True)

    version: str = NETWORK_VERSION
    exported_at: str | None = None
    behaviours: list[Behaviour] = []
    outcomes: list[Outcome] = []
    values: list[Value] = []
    links: list[Link] = []

    def split_links(self) -> tuple[list[BehaviourOutcomeLink], list[OutcomeValueLink]]:
        """Split links by kind, preserving order within each kind."""
        bo_links: list[BehaviourOutcomeLink] = []
        ov_links: list[OutcomeValueLink] = []
        for link in self.links:
            match link:
                case BehaviourOutcomeLink():
                    bo_links.append(link)
                case OutcomeValueLink():
                    ov_links.append(link)
                case _:
                    assert_never(link)
        return bo_links, ov_links

    def behaviour_outcome_links(self) -> list[BehaviourOutcomeLink]:
        return self.split_links()[0]

    def outcome_value_links(self) -> list[OutcomeValueLink]:
        return self.split_links()[1]

    def behaviours_by_id(self) -> dict[str, Behaviour]:
        return {behaviour.id: behaviour for behaviour in self.behaviours}

    def outcomes_by_id(self) -> dict[str, Outcome]:
        return {outcome.id: outcome for outcome in self.outcomes}

    def values_by_id(self) -> dict[str, Value]:
        return {value.id: value for value in self.values}

    def is_empty(self) -> bool:
        """True when the network has no nodes (links are ignored)."""
        return not (self.behaviours or self.outcomes or self.values)

    def node_count(self) -> int:
        return len(self.behaviours) + len(self.outcomes) + len(self.values)

    def stats(self) -> NetworkStats:
        return NetworkStats(
            behaviours=len(self.behaviours),
            outcomes=len(self.outcomes),
            values=len(self.values),
            links=len(self.links),
        )

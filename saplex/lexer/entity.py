"""Game entities: attributes and objects that card text refers to."""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Final

START_OF_BATTLE: Final[str] = "Start of battle"


class EntityKind(StrEnum):
    PET = "pet"
    FOOD = "food"
    TOY = "toy"
    PACK = "pack"
    ABILITY = "ability"

    PERK = "perk"
    AILMENT = "ailment"
    SPACE = "space"
    BATTLE = "battle"
    TURN = "turn"
    ATTACK = "attack"
    DAMAGE = "damage"
    HEALTH = "health"
    GOLD = "gold"
    TRUMPET = "trumpet"
    LEVEL = "level"
    TIER = "tier"
    USES = "uses"
    EXPERIENCE = "experience"

    ATTACK_PERCENT = "attack_percent"
    HEALTH_PERCENT = "health_percent"
    DAMAGE_PERCENT = "damage_percent"
    GOLD_PERCENT = "gold_percent"
    TRUMPET_PERCENT = "trumpet_percent"

    @property
    def is_named(self) -> bool:
        return self in _NAMED_KINDS

    @property
    def is_percent(self) -> bool:
        return self in _PERCENT_KINDS

    @property
    def takes_value(self) -> bool:
        return not self.is_named

    @property
    def percent_variant(self) -> "EntityKind | None":
        return _PERCENT_VARIANTS.get(self)


_NAMED_KINDS: Final[frozenset[EntityKind]] = frozenset(
    {EntityKind.PET, EntityKind.FOOD, EntityKind.TOY, EntityKind.PACK, EntityKind.ABILITY}
)

_PERCENT_VARIANTS: Final[dict[EntityKind, EntityKind]] = {
    EntityKind.ATTACK: EntityKind.ATTACK_PERCENT,
    EntityKind.HEALTH: EntityKind.HEALTH_PERCENT,
    EntityKind.DAMAGE: EntityKind.DAMAGE_PERCENT,
    EntityKind.GOLD: EntityKind.GOLD_PERCENT,
    EntityKind.TRUMPET: EntityKind.TRUMPET_PERCENT,
}

_PERCENT_KINDS: Final[frozenset[EntityKind]] = frozenset(_PERCENT_VARIANTS.values())


@dataclass(frozen=True, slots=True)
class Entity:
    """An entity reference, optionally carrying a value or identity.

    - Value kinds carry `value` (int, or float for percent kinds).
    - Pets carry an optional `name` and attribute tag `attr` (ex. `Strawberry`).
    - Food, toys, packs and abilities carry an optional `name`.
    A kind without any payload means the entity itself (ex. `attack`).
    """

    kind: EntityKind
    value: int | float | None = None
    name: str | None = None
    attr: str | None = None

    def __post_init__(self) -> None:
        if self.kind.is_named and self.value is not None:
            raise ValueError(f"{self.kind} entities do not carry a value")
        if not self.kind.is_named and (self.name is not None or self.attr is not None):
            raise ValueError(f"{self.kind} entities do not carry a name")
        if self.attr is not None and self.kind != EntityKind.PET:
            raise ValueError("Only pets carry an attribute tag")

    @staticmethod
    def from_keyword(word: str) -> "Entity | None":
        kind = ENTITY_WORDS.get(word.lower())
        return Entity(kind) if kind is not None else None

    @staticmethod
    def pet(name: str | None = None, attr: str | None = None) -> "Entity":
        return Entity(EntityKind.PET, name=name, attr=attr)

    @staticmethod
    def food(name: str | None = None) -> "Entity":
        return Entity(EntityKind.FOOD, name=name)

    @property
    def is_bare(self) -> bool:
        return self.value is None and self.name is None and self.attr is None

    @property
    def is_trumpet(self) -> bool:
        return self.kind in (EntityKind.TRUMPET, EntityKind.TRUMPET_PERCENT)

    def numeric_value(self) -> int | None:
        """Value coerced to int; percent values are truncated."""
        if self.value is None:
            return None
        return int(self.value)

    def with_literal(self, literal: str) -> "Entity":
        """Attach a trailing numeral (ex. `+3`, `12`) to value-bearing kinds."""
        if not self.kind.takes_value:
            return self
        cleaned = literal.lstrip("+")
        value: int | float = float(cleaned) if self.kind.is_percent else int(cleaned)
        return replace(self, value=value)

    def to_percent(self) -> "Entity | None":
        """Percent variant of this entity, or None when the kind has none."""
        variant = self.kind.percent_variant
        if variant is None:
            return None
        value = float(self.value) if self.value is not None else None
        return Entity(variant, value)


ENTITY_WORDS: Final[dict[str, EntityKind]] = {
    "pet": EntityKind.PET,
    "pets": EntityKind.PET,
    "food": EntityKind.FOOD,
    "foods": EntityKind.FOOD,
    "toy": EntityKind.TOY,
    "toys": EntityKind.TOY,
    "perk": EntityKind.PERK,
    "perks": EntityKind.PERK,
    "ailment": EntityKind.AILMENT,
    "ailments": EntityKind.AILMENT,
    "turn": EntityKind.TURN,
    "turns": EntityKind.TURN,
    "battle": EntityKind.BATTLE,
    "battles": EntityKind.BATTLE,
    "space": EntityKind.SPACE,
    "spaces": EntityKind.SPACE,
    "attack": EntityKind.ATTACK,
    "damage": EntityKind.DAMAGE,
    "health": EntityKind.HEALTH,
    "healthy": EntityKind.HEALTH,
    "gold": EntityKind.GOLD,
    "trumpet": EntityKind.TRUMPET,
    "trumpets": EntityKind.TRUMPET,
    "level": EntityKind.LEVEL,
    "tier": EntityKind.TIER,
    "uses": EntityKind.USES,
    "experience": EntityKind.EXPERIENCE,
    "ability": EntityKind.ABILITY,
    "pack": EntityKind.PACK,
}

"""Rule-engine type definitions.

Capability protocols for the collaborators the rules read from and the
managers write to, plus small immutable value types.
"""

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from dentalcare.database.models.enums import JawPosition, JawSide

# Zero-argument callable returning a uniform float in [0, 1)
RandomSource = Callable[[], float]


@runtime_checkable
class SkillSource(Protocol):
    """Anything that can report a raw skill progression value."""

    def get_skill_level(self, skill_key: str) -> int | float | None: ...


@runtime_checkable
class AnestheticSource(Protocol):
    """Anything that knows whether it is currently numbed."""

    def is_numbed(self) -> bool: ...


@runtime_checkable
class RewardSink(Protocol):
    """Receives reward items."""

    def add_item(self, item_key: str) -> object: ...


@runtime_checkable
class ExperienceSink(Protocol):
    """Receives experience points for a skill track."""

    def add_experience(self, skill_key: str, amount: int) -> object: ...


@runtime_checkable
class BodyStateSink(Protocol):
    """Mutates pain, bleeding and wound state.

    Corpse practice must never call this.
    """

    def apply_wound(
        self,
        pain: int,
        bleeding: bool = False,
        deep_wound: bool = False,
        caused_by: str = "dental work",
    ) -> object: ...


class Clinician(SkillSource, AnestheticSource, Protocol):
    """Inputs the formula engine reads from an actor."""


class Practitioner(Clinician, RewardSink, ExperienceSink, Protocol):
    """An actor that can practice extractions and be rewarded for it."""


@dataclass(frozen=True)
class ToothLayout:
    """Fixed placement of a tooth derived from its index.

    Attributes:
        index: 1-32.
        position: Upper or lower jaw.
        side: Left or right.
        number: 1-8 within its quadrant.
    """

    index: int
    position: JawPosition
    side: JawSide
    number: int

    @property
    def name(self) -> str:
        return f"{self.position.value.title()} {self.side.value.title()} {self.number}"

"""Pet stat rules: decay, action effects and mood."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ledger_tamagotchi.models.pet import MAX_STAT, PetMood

if TYPE_CHECKING:
    from ledger_tamagotchi.models.pet import Pet

MIN_STAT = 0

# Stats decay once per full hour since the last update
DECAY_PERIOD_SECONDS = 3600

# Action effects
FEED_HUNGER_GAIN = 30
PLAY_HAPPINESS_GAIN = 20
PLAY_ENERGY_COST = 15
SLEEP_ENERGY_GAIN = 40
WORK_ENERGY_COST = 20
WORK_HAPPINESS_COST = 10

# Economy
WORK_COIN_REWARD = 25
GLASSES_PRICE = 50

# Mood thresholds on the average of hunger, happiness and energy
HAPPY_MOOD_THRESHOLD = 60
NEUTRAL_MOOD_THRESHOLD = 30


def clamp(value: int, low: int = MIN_STAT, high: int = MAX_STAT) -> int:
    """Bound a stat to [low, high]."""
    return max(low, min(high, value))


@dataclass(frozen=True)
class DecayResult:
    """Outcome of applying elapsed time to a living pet."""

    periods: int
    hunger: int
    happiness: int
    is_alive: bool

    @property
    def changed(self) -> bool:
        return self.periods > 0


def calculate_decay(hunger: int, happiness: int, last_updated: int, now: int) -> DecayResult:
    """Compute decayed stats for a living pet.

    Hunger drops one point per whole hour elapsed; happiness drops by half
    that many whole hours, truncated again (``periods // 2``, which is not
    the same as ``elapsed // 7200``). A pet whose hunger or happiness hits
    zero dies. A clock that runs backwards counts as no time elapsed.
    """
    elapsed = max(0, now - last_updated)
    periods = elapsed // DECAY_PERIOD_SECONDS

    if periods == 0:
        return DecayResult(periods=0, hunger=hunger, happiness=happiness, is_alive=True)

    new_hunger = clamp(hunger - periods)
    new_happiness = clamp(happiness - periods // 2)
    return DecayResult(
        periods=periods,
        hunger=new_hunger,
        happiness=new_happiness,
        is_alive=new_hunger > MIN_STAT and new_happiness > MIN_STAT,
    )


def apply_decay(pet: Pet, now: int) -> DecayResult | None:
    """Apply lazy decay to a pet in place.

    Returns the decay result when the pet changed, ``None`` when it was
    already dead or less than a full period has passed. Dead pets never
    decay further.
    """
    if not pet.is_alive:
        return None

    result = calculate_decay(pet.hunger, pet.happiness, pet.last_updated, now)
    if not result.changed:
        return None

    pet.hunger = result.hunger
    pet.happiness = result.happiness
    pet.last_updated = max(pet.last_updated, now)
    if not result.is_alive:
        pet.is_alive = False

    return result


def feed(pet: Pet) -> None:
    """Feeding fills the pet up."""
    pet.hunger = clamp(pet.hunger + FEED_HUNGER_GAIN)


def play(pet: Pet) -> None:
    """Playing cheers the pet up at the cost of energy."""
    pet.happiness = clamp(pet.happiness + PLAY_HAPPINESS_GAIN)
    pet.energy = clamp(pet.energy - PLAY_ENERGY_COST)


def sleep(pet: Pet) -> None:
    pet.energy = clamp(pet.energy + SLEEP_ENERGY_GAIN)


def can_work(pet: Pet) -> bool:
    return pet.energy >= WORK_ENERGY_COST


def work(pet: Pet) -> None:
    """Working tires the pet and makes it a little less happy."""
    pet.energy = clamp(pet.energy - WORK_ENERGY_COST)
    pet.happiness = clamp(pet.happiness - WORK_HAPPINESS_COST)


def can_afford_glasses(coins: int) -> bool:
    return coins >= GLASSES_PRICE


def wear_glasses(pet: Pet) -> None:
    pet.has_glasses = True


def calculate_mood(is_alive: bool, hunger: int, happiness: int, energy: int) -> PetMood:
    """Determine pet mood from the average of its stats."""
    if not is_alive:
        return PetMood.DECEASED

    average = (hunger + happiness + energy) / 3
    if average > HAPPY_MOOD_THRESHOLD:
        return PetMood.HAPPY
    if average > NEUTRAL_MOOD_THRESHOLD:
        return PetMood.NEUTRAL
    return PetMood.SAD

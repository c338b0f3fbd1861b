"""Tests for pet logic."""

import pytest

from ledger_tamagotchi.models.pet import MAX_STAT, Pet, PetMood
from ledger_tamagotchi.services import pet_logic
from ledger_tamagotchi.services.pet_logic import (
    DECAY_PERIOD_SECONDS,
    apply_decay,
    calculate_decay,
    calculate_mood,
    clamp,
)

HOUR = DECAY_PERIOD_SECONDS


def make_pet(**overrides: object) -> Pet:
    values: dict[str, object] = {
        "owner": "GALICE",
        "name": "Pixel",
        "birthdate": 0,
        "last_updated": 0,
        "is_alive": True,
        "hunger": MAX_STAT,
        "happiness": MAX_STAT,
        "energy": MAX_STAT,
        "has_glasses": False,
    }
    values.update(overrides)
    return Pet(**values)


class TestClamp:
    """Tests for clamp function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-15, 0), (0, 0), (55, 55), (100, 100), (130, 100)],
    )
    def test_bounds(self, value: int, expected: int) -> None:
        assert clamp(value) == expected


class TestCalculateDecay:
    """Tests for calculate_decay function."""

    def test_no_decay_within_first_hour(self) -> None:
        """Less than a full period leaves stats alone."""
        result = calculate_decay(100, 100, last_updated=0, now=HOUR - 1)
        assert result.changed is False
        assert (result.hunger, result.happiness) == (100, 100)

    def test_one_hour(self) -> None:
        """One hour costs a hunger point but no happiness."""
        result = calculate_decay(100, 100, last_updated=0, now=HOUR)
        assert result.periods == 1
        assert result.hunger == 99
        assert result.happiness == 100
        assert result.is_alive is True

    def test_happiness_decays_at_half_rate(self) -> None:
        result = calculate_decay(100, 100, last_updated=0, now=7 * HOUR + 1800)
        assert result.periods == 7
        assert result.hunger == 93
        assert result.happiness == 97

    def test_starvation_after_one_hundred_hours(self) -> None:
        result = calculate_decay(100, 100, last_updated=0, now=100 * HOUR)
        assert result.hunger == 0
        assert result.happiness == 50
        assert result.is_alive is False

    def test_hunger_saturates_at_zero(self) -> None:
        result = calculate_decay(10, 100, last_updated=0, now=500 * HOUR)
        assert result.hunger == 0
        assert result.happiness == 0
        assert result.is_alive is False

    def test_unhappiness_alone_is_fatal(self) -> None:
        """A well-fed pet still dies when happiness runs out."""
        result = calculate_decay(100, 1, last_updated=0, now=2 * HOUR)
        assert result.hunger == 98
        assert result.happiness == 0
        assert result.is_alive is False

    def test_clock_running_backwards_counts_as_no_time(self) -> None:
        result = calculate_decay(80, 70, last_updated=10 * HOUR, now=HOUR)
        assert result.changed is False
        assert (result.hunger, result.happiness) == (80, 70)


class TestApplyDecay:
    """Tests for apply_decay function."""

    def test_updates_pet_in_place(self) -> None:
        pet = make_pet()
        result = apply_decay(pet, 3 * HOUR + 59)

        assert result is not None
        assert pet.hunger == 97
        assert pet.happiness == 99
        assert pet.energy == MAX_STAT
        assert pet.last_updated == 3 * HOUR + 59

    def test_no_change_returns_none(self) -> None:
        pet = make_pet(last_updated=HOUR)
        assert apply_decay(pet, HOUR + 10) is None
        assert pet.last_updated == HOUR

    def test_marks_pet_dead(self) -> None:
        pet = make_pet(hunger=5)
        apply_decay(pet, 5 * HOUR)
        assert pet.hunger == 0
        assert pet.is_alive is False

    def test_dead_pet_does_not_decay(self) -> None:
        pet = make_pet(is_alive=False, hunger=0, happiness=40)
        assert apply_decay(pet, 1000 * HOUR) is None
        assert pet.hunger == 0
        assert pet.happiness == 40
        assert pet.last_updated == 0

    def test_hourly_checks_never_reduce_happiness(self) -> None:
        """Each check restarts the clock, so single-hour gaps never halve to a point."""
        pet = make_pet()
        for hour in range(1, 11):
            apply_decay(pet, hour * HOUR)

        assert pet.hunger == 90
        assert pet.happiness == 100


class TestActions:
    """Tests for action effects."""

    def test_feed_caps_hunger(self) -> None:
        pet = make_pet(hunger=85)
        pet_logic.feed(pet)
        assert pet.hunger == MAX_STAT

    def test_feed(self) -> None:
        pet = make_pet(hunger=40)
        pet_logic.feed(pet)
        assert pet.hunger == 70

    def test_play(self) -> None:
        pet = make_pet(happiness=95, energy=10)
        pet_logic.play(pet)
        assert pet.happiness == MAX_STAT
        assert pet.energy == 0

    def test_sleep(self) -> None:
        pet = make_pet(energy=20)
        pet_logic.sleep(pet)
        assert pet.energy == 60
        pet_logic.sleep(pet)
        assert pet.energy == MAX_STAT

    def test_work(self) -> None:
        pet = make_pet(happiness=5)
        pet_logic.work(pet)
        assert pet.energy == 80
        assert pet.happiness == 0

    @pytest.mark.parametrize(("energy", "expected"), [(19, False), (20, True), (100, True)])
    def test_can_work(self, energy: int, expected: bool) -> None:
        assert pet_logic.can_work(make_pet(energy=energy)) is expected

    @pytest.mark.parametrize(("coins", "expected"), [(0, False), (49, False), (50, True)])
    def test_can_afford_glasses(self, coins: int, expected: bool) -> None:
        assert pet_logic.can_afford_glasses(coins) is expected

    def test_wear_glasses(self) -> None:
        pet = make_pet()
        pet_logic.wear_glasses(pet)
        assert pet.has_glasses is True


class TestCalculateMood:
    """Tests for calculate_mood function."""

    def test_happy(self) -> None:
        assert calculate_mood(True, 100, 100, 100) == PetMood.HAPPY

    def test_neutral(self) -> None:
        assert calculate_mood(True, 60, 60, 60) == PetMood.NEUTRAL

    def test_sad(self) -> None:
        assert calculate_mood(True, 30, 30, 30) == PetMood.SAD

    def test_deceased_regardless_of_stats(self) -> None:
        assert calculate_mood(False, 0, 100, 100) == PetMood.DECEASED

"""
test_models.py — Tests for input coercion, record construction and the
roster operations behind the Add / Remove trainer buttons.
"""

import dataclasses

import pytest

from training_quote.constants import (
    DEFAULT_FLIGHT_COST,
    DEFAULT_LODGING_COST_PER_NIGHT,
    DurationBucket,
    TrainerLocation,
    TrainerRole,
    TrainingType,
    TravelCosting,
    TravelTime,
)
from training_quote.models import (
    Selection,
    TrainerLine,
    TravelDetails,
    add_trainer,
    default_selection,
    parse_amount,
    parse_count,
    parse_hours,
    parse_nights,
    remove_trainer,
    update_trainer,
    update_travel,
)


class TestCoercion:

    @pytest.mark.parametrize("raw,expected", [
        ("3", 3), (2, 2), (2.7, 2), ("abc", 1), ("", 1), (None, 1), (0, 1), ("-4", 1),
    ])
    def test_parse_count(self, raw, expected):
        assert parse_count(raw) == expected

    @pytest.mark.parametrize("raw,expected", [
        ("12.5", 12.5), (40, 40.0), ("x", 0.0), (None, 0.0), (-5, 0.0), (float("nan"), 0.0),
    ])
    def test_parse_amount(self, raw, expected):
        assert parse_amount(raw) == expected

    def test_parse_hours_keeps_fractions(self):
        assert parse_hours("1.5") == 1.5
        assert parse_hours("lots") == 0

    def test_parse_nights(self):
        assert parse_nights("3") == 3
        assert parse_nights(-1) == 0
        assert parse_nights("n/a") == 0


class TestRecords:

    def test_travel_defaults(self):
        t = TravelDetails()
        assert t.needs_flight is False
        assert t.flight_cost == DEFAULT_FLIGHT_COST == 400
        assert t.lodging_cost_per_night == DEFAULT_LODGING_COST_PER_NIGHT == 150
        assert (t.lodging_nights, t.mileage_cost, t.meal_allowance, t.other_expenses) == (0, 0, 0, 0)

    def test_line_accepts_raw_tags(self):
        line = TrainerLine(id=1, role="apprentice", location="traveling")
        assert line.role is TrainerRole.APPRENTICE
        assert line.location is TrainerLocation.TRAVELING

    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError):
            TrainerLine(id=1, role="coach")

    def test_selection_accepts_raw_tags(self):
        selection = Selection(training_type="virtual", duration="480",
                              travel_costing="flat-fee", travel_time="Half day",
                              trainers=[TrainerLine(id=1)])
        assert selection.training_type is TrainingType.VIRTUAL
        assert selection.duration is DurationBucket.MIN_480
        assert selection.travel_costing is TravelCosting.FLAT_FEE
        assert selection.travel_time is TravelTime.HALF_DAY
        assert isinstance(selection.trainers, tuple)
        assert not selection.is_in_person

    def test_unknown_duration_rejected(self):
        with pytest.raises(ValueError):
            Selection(duration="45")

    def test_records_are_frozen(self):
        line = TrainerLine(id=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.count = 5


class TestRoster:

    def test_default_selection(self):
        selection = default_selection()
        assert selection.training_type is TrainingType.IN_PERSON
        assert selection.duration is DurationBucket.MIN_60
        assert selection.pm_hours == 0
        assert len(selection.trainers) == 1
        lead = selection.trainers[0]
        assert (lead.id, lead.role, lead.count, lead.location) == (
            1, TrainerRole.LEAD, 1, TrainerLocation.LOCAL)

    def test_default_selection_costing(self):
        assert default_selection(TravelCosting.FLAT_FEE).travel_costing is TravelCosting.FLAT_FEE

    def test_add_trainer_appends_local_trainer(self):
        trainers = add_trainer(default_selection().trainers)
        assert len(trainers) == 2
        added = trainers[-1]
        assert added.id == 2
        assert added.role is TrainerRole.TRAINER
        assert added.count == 1
        assert added.location is TrainerLocation.LOCAL
        assert added.travel == TravelDetails()

    def test_add_trainer_uses_max_id(self):
        trainers = (TrainerLine(id=1), TrainerLine(id=7))
        assert add_trainer(trainers)[-1].id == 8

    def test_remove_last_trainer_is_noop(self):
        trainers = default_selection().trainers
        assert remove_trainer(trainers, 1) == trainers

    def test_remove_trainer(self):
        trainers = add_trainer(add_trainer(default_selection().trainers))
        remaining = remove_trainer(trainers, 2)
        assert [t.id for t in remaining] == [1, 3]

    def test_remove_unknown_id_keeps_roster(self):
        trainers = add_trainer(default_selection().trainers)
        assert remove_trainer(trainers, 99) == trainers

    def test_update_trainer_only_touches_target(self):
        trainers = add_trainer(default_selection().trainers)
        updated = update_trainer(trainers, 2, role="apprentice", count="3")
        assert updated[0] == trainers[0]
        assert updated[1].role is TrainerRole.APPRENTICE
        assert updated[1].count == 3

    def test_update_trainer_clamps_count(self):
        trainers = update_trainer(default_selection().trainers, 1, count="oops")
        assert trainers[0].count == 1

    def test_update_travel(self):
        trainers = update_travel(
            default_selection().trainers, 1,
            needs_flight=1, flight_cost="650", lodging_nights="-2", meal_allowance="abc",
        )
        travel = trainers[0].travel
        assert travel.needs_flight is True
        assert travel.flight_cost == 650.0
        assert travel.lodging_nights == 0
        assert travel.meal_allowance == 0.0
        assert travel.lodging_cost_per_night == 150

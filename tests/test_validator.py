"""Tests for weekly schedule validation."""

import copy

import pytest

from weekplan.validator import (
    INVALID_NOTES,
    MISSING_DATA,
    NO_VALID_SLOT,
    ValidationResult,
    find_overlaps,
    validate_weekly_schedule,
)


def _empty_week():
    return {day: [] for day in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")}


def test_valid_schedule(reference_schedule):
    result = validate_weekly_schedule(reference_schedule["scheduleData"], reference_schedule["dailyNotes"])
    assert result.is_valid is True
    assert result.errors == []


def test_start_after_end_is_reported():
    week = _empty_week()
    week["monday"] = [["09:00", "12:00"]]
    week["tuesday"] = [["18:00", "10:00"]]
    week["wednesday"] = [["08:30", "16:30"]]

    result = validate_weekly_schedule(week, {})
    assert result.is_valid is False
    assert result.errors == [
        'Pour le créneau 1 de tuesday, l\'heure de début "18:00" doit être antérieure à l\'heure de fin "10:00"'
    ]


def test_equal_start_and_end_is_reported():
    week = _empty_week()
    week["monday"] = [["09:00", "12:00"], ["13:00", "13:00"]]

    result = validate_weekly_schedule(week)
    assert result.errors == [
        'Pour le créneau 2 de monday, l\'heure de début "13:00" doit être antérieure à l\'heure de fin "13:00"'
    ]


def test_invalid_time_formats_are_reported():
    week = _empty_week()
    week["monday"] = [["09:00", "12:00"]]
    week["tuesday"] = [["10:00", "18:00"]]
    week["wednesday"] = [["25:30", "16:30"]]
    week["friday"] = [["09:00", "17:60"]]

    result = validate_weekly_schedule(week, {})
    assert result.is_valid is False
    assert any("25:30" in error for error in result.errors)
    assert any("17:60" in error for error in result.errors)
    assert result.errors == [
        'L\'heure de début "25:30" du créneau 1 de wednesday n\'est pas au format valide (HH:MM)',
        'L\'heure de fin "17:60" du créneau 1 de friday n\'est pas au format valide (HH:MM)',
    ]


def test_both_malformed_boundaries_are_reported():
    week = _empty_week()
    week["monday"] = [["9h", "24:00"], ["09:00", "17:00"]]

    result = validate_weekly_schedule(week)
    assert len(result.errors) == 2
    assert '"9h"' in result.errors[0]
    assert '"24:00"' in result.errors[1]


def test_any_minute_value_is_accepted():
    week = _empty_week()
    week["monday"] = [["09:07", "12:53"]]

    assert validate_weekly_schedule(week).is_valid


def test_empty_schedule_is_rejected():
    result = validate_weekly_schedule(_empty_week(), {"monday": "Jour férié"})
    assert result.is_valid is False
    assert result.errors == [NO_VALID_SLOT]


def test_blank_note_is_reported():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"]]

    result = validate_weekly_schedule(week, {"monday": "Note valide", "tuesday": ""})
    assert result.is_valid is False
    assert result.errors == ["La note pour tuesday ne peut pas être vide"]


def test_whitespace_only_note_is_blank():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"]]

    result = validate_weekly_schedule(week, {"friday": "   "})
    assert result.errors == ["La note pour friday ne peut pas être vide"]


def test_omitted_notes_are_fine():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"]]

    assert validate_weekly_schedule(week, None).is_valid
    assert validate_weekly_schedule(week, {}).is_valid


def test_notes_that_are_not_a_mapping_are_reported():
    result = validate_weekly_schedule({"monday": [["09:00", "17:00"]]}, ["oops"])
    assert result.is_valid is False
    assert result.errors == [INVALID_NOTES]

    result = validate_weekly_schedule({"monday": []}, "Formation")
    assert result.errors == [NO_VALID_SLOT, INVALID_NOTES]


def test_slot_with_wrong_shape_is_reported():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"]]
    week["tuesday"] = [["10:00"]]

    result = validate_weekly_schedule(week, {})
    assert result.is_valid is False
    assert any("n'est pas un tableau valide de deux éléments" in error for error in result.errors)
    assert result.errors == ["Le créneau 1 de tuesday n'est pas un tableau valide de deux éléments"]


def test_non_list_slots_are_structural_errors():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"], "10:00-12:00", ["a", "b", "c"]]

    result = validate_weekly_schedule(week)
    assert result.errors == [
        "Le créneau 2 de monday n'est pas un tableau valide de deux éléments",
        "Le créneau 3 de monday n'est pas un tableau valide de deux éléments",
    ]


def test_missing_schedule_data_short_circuits():
    result = validate_weekly_schedule(None, {"monday": ""})
    assert result.is_valid is False
    assert result.errors == [MISSING_DATA]


def test_day_value_that_is_not_a_list():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"]]
    week["tuesday"] = "10:00-18:00"

    result = validate_weekly_schedule(week)
    assert result.errors == ["Les créneaux pour tuesday ne sont pas un tableau valide"]


def test_unknown_day_key_is_reported():
    week = _empty_week()
    week["monday"] = [["09:00", "17:00"]]
    week["lundi"] = [["09:00", "17:00"]]

    result = validate_weekly_schedule(week)
    assert result.errors == ["Le jour lundi n'est pas un jour valide de la semaine"]


def test_invalid_slots_do_not_count_towards_non_empty_rule():
    week = _empty_week()
    week["monday"] = [["17:00", "09:00"]]
    week["tuesday"] = [["10:00"]]

    result = validate_weekly_schedule(week)
    assert result.errors[-1] == NO_VALID_SLOT
    assert len(result.errors) == 3


def test_all_violations_reported_in_week_order():
    # Insertion order is deliberately scrambled
    week = {
        "wednesday": [["25:00", "26:00"]],
        "tuesday": [["18:00", "10:00"]],
        "monday": [["10:00"]],
        "thursday": [],
        "friday": [],
        "saturday": [],
        "sunday": [],
    }

    result = validate_weekly_schedule(week, {"sunday": "", "friday": "  "})
    assert result.errors == [
        "Le créneau 1 de monday n'est pas un tableau valide de deux éléments",
        'Pour le créneau 1 de tuesday, l\'heure de début "18:00" doit être antérieure à l\'heure de fin "10:00"',
        'L\'heure de début "25:00" du créneau 1 de wednesday n\'est pas au format valide (HH:MM)',
        'L\'heure de fin "26:00" du créneau 1 de wednesday n\'est pas au format valide (HH:MM)',
        NO_VALID_SLOT,
        "La note pour friday ne peut pas être vide",
        "La note pour sunday ne peut pas être vide",
    ]


def test_validation_is_idempotent(reference_schedule):
    broken = copy.deepcopy(reference_schedule)
    broken["scheduleData"]["friday"] = [["17:00", "09:00"], ["x"]]
    broken["dailyNotes"]["saturday"] = ""

    first = validate_weekly_schedule(broken["scheduleData"], broken["dailyNotes"])
    second = validate_weekly_schedule(broken["scheduleData"], broken["dailyNotes"])
    assert first == second
    assert broken["scheduleData"]["friday"] == [["17:00", "09:00"], ["x"]]


def test_reordering_valid_slots_keeps_verdict(reference_schedule):
    reordered = copy.deepcopy(reference_schedule)
    reordered["scheduleData"]["monday"].reverse()

    result = validate_weekly_schedule(reordered["scheduleData"], reordered["dailyNotes"])
    assert result.is_valid is True


def test_tuple_slots_are_accepted():
    week = _empty_week()
    week["monday"] = [("09:00", "17:00")]

    assert validate_weekly_schedule(week).is_valid


def test_missing_weekday_is_an_empty_day():
    result = validate_weekly_schedule({"monday": [["09:00", "17:00"]]})
    assert result.is_valid is True


@pytest.mark.currently_permitted
def test_overlapping_slots_are_currently_permitted():
    week = _empty_week()
    week["monday"] = [["09:00", "12:00"], ["10:00", "13:00"]]

    result = validate_weekly_schedule(week)
    assert result.is_valid is True
    assert find_overlaps(week) == [("monday", 0, 1)]


def test_find_overlaps_ignores_touching_and_invalid_slots():
    week = _empty_week()
    week["tuesday"] = [["09:00", "12:00"], ["12:00", "14:00"], ["13:00", "11:00"], ["10:00"]]

    assert find_overlaps(week) == []


def test_result_to_dict():
    result = ValidationResult()
    assert result.to_dict() == {"isValid": True, "errors": []}

    result.add("boom")
    assert result.to_dict() == {"isValid": False, "errors": ["boom"]}

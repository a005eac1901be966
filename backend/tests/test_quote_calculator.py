from decimal import Decimal

import pytest

from bridal_quote.schemas.quote import (
    CalculationResult,
    Payment,
    ServiceChoice,
    ServiceType,
)
from bridal_quote.services.payments import apply_payments
from bridal_quote.services.quote_calculator import (
    calculate_grand_summary,
    calculate_quote,
    compute_per_day_totals,
)

DATE_1 = "2026-06-20"
DATE_2 = "2026-06-21"


def _labels(breakdown):
    return [line.label for line in breakdown.lines]


def _line(breakdown, label):
    matches = [line for line in breakdown.lines if line.label == label]
    assert len(matches) == 1, f"expected one {label!r} line, got {_labels(breakdown)}"
    return matches[0]


def _assert_invariants(result: CalculationResult, global_total: Decimal):
    for day in result.day_breakdowns:
        assert day.subtotal == sum((l.total for l in day.lines), Decimal("0"))
    assert result.subtotal == sum((d.subtotal for d in result.day_breakdowns), Decimal("0")) + global_total
    assert result.due == max(Decimal("0"), result.subtotal - result.total_paid)


def test_bridal_only_day(makeup_only, make_form, prices):
    form = make_form(days=[{}])
    quote = calculate_quote(makeup_only, form, None, prices, [DATE_1])

    [result] = quote.calculations
    [day] = result.day_breakdowns
    assert _labels(day) == ["Bridal MU"]
    assert day.subtotal == Decimal("120.00")
    assert result.subtotal == Decimal("120")
    _assert_invariants(result, Decimal("0"))


def test_cars_and_assistants_split(makeup_only, make_form, prices):
    form = make_form(days=[{"num_people": 7, "num_cars": 2, "travel_fee": 100}])
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    [day] = result.day_breakdowns

    cars = _line(day, "Travelling fee (cars)")
    assert cars.qty == 2
    assert cars.unit == Decimal("100")
    assert cars.total == Decimal("200.00")

    assistants = _line(day, "Assistant travel fee")
    assert assistants.qty == 5
    assert assistants.unit == Decimal("35.00")
    assert assistants.total == Decimal("175.00")
    assert assistants.meta == "35% × (people − cars)"

    assert "Bridal MU" in _labels(day)
    assert day.subtotal == Decimal("495.00")


def test_travel_fee_blocks_scheduled_return(makeup_only, make_form, prices):
    form = make_form(
        days=[
            {
                "scheduled_return": True,
                "scheduled_return_bride": True,
                "scheduled_return_guests": 2,
                "travel_fee": 50,
            }
        ]
    )
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    [day] = result.day_breakdowns
    assert _labels(day) == ["Bridal MU", "Travelling fee (cars)"]
    assert day.subtotal == Decimal("170")


def test_guest_scheduled_return_requires_bride(makeup_only, make_form, prices):
    form = make_form(
        days=[
            {
                "scheduled_return": True,
                "scheduled_return_bride": False,
                "scheduled_return_guests": 3,
                "travel_fee": 0,
            }
        ]
    )
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    [day] = result.day_breakdowns
    assert not any(label.startswith("scheduled return") for label in _labels(day))


def test_scheduled_return_for_bride_and_guests(makeup_only, make_form, prices):
    form = make_form(
        days=[
            {
                "scheduled_return": True,
                "scheduled_return_bride": True,
                "scheduled_return_guests": 2,
            }
        ]
    )
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    [day] = result.day_breakdowns
    assert _labels(day) == ["Bridal MU", "scheduled return (bride)", "scheduled return (guests)"]
    assert _line(day, "scheduled return (bride)").total == Decimal("80")
    guests = _line(day, "scheduled return (guests)")
    assert guests.qty == 2
    assert guests.total == Decimal("80")


def test_scheduled_return_toggle_off_ignores_bride_flag(makeup_only, make_form, prices):
    form = make_form(days=[{"scheduled_return": False, "scheduled_return_bride": True}])
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    assert _labels(result.day_breakdowns[0]) == ["Bridal MU"]


def test_two_days_plus_trial(makeup_only, make_form, prices):
    form = make_form(days=[{}, {}], trials=1)
    quote = calculate_quote(makeup_only, form, None, prices, [DATE_1, DATE_2])

    [result] = quote.calculations
    assert [d.subtotal for d in result.day_breakdowns] == [Decimal("120"), Decimal("120")]
    assert result.subtotal == Decimal("320.00")
    assert quote.grand_summary.grand_total == Decimal("320.00")
    assert quote.grand_summary.total_due == Decimal("320.00")
    _assert_invariants(result, Decimal("80"))


def test_full_day_line_order(makeup_only, make_form, prices):
    form = make_form(
        days=[
            {
                "guests": 4,
                "scheduled_return": True,
                "scheduled_return_bride": True,
                "scheduled_return_guests": 1,
                "exclusivity": True,
                "touchup_hours": "1.5",
                "num_people": 2,
                "num_cars": 2,
            }
        ]
    )
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    [day] = result.day_breakdowns
    assert _labels(day) == [
        "Guests",
        "Bridal MU",
        "scheduled return (bride)",
        "scheduled return (guests)",
        "Exclusivity fee",
        "Touch-ups",
    ]
    assert _line(day, "Guests").total == Decimal("240")
    exclusivity = _line(day, "Exclusivity fee")
    assert exclusivity.qty is None
    assert exclusivity.total == Decimal("200")
    touchups = _line(day, "Touch-ups")
    assert touchups.meta == "1.5h"
    assert touchups.total == Decimal("75")
    assert day.subtotal == Decimal("240") + 120 + 80 + 40 + 200 + 75


def test_missing_day_entries_use_defaults(makeup_only, make_form, prices):
    form = make_form(days=[{"guests": 2, "beauty_venue": "Hotel Cascais"}])
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1, DATE_2]).calculations

    first, second = result.day_breakdowns
    assert first.venue == "Hotel Cascais"
    assert second.venue is None
    assert _labels(second) == ["Bridal MU"]
    assert second.subtotal == Decimal("120")


def test_bridal_line_present_every_day(makeup_only, make_form, prices):
    form = make_form(
        days=[
            {"travel_fee": 80, "num_people": 3, "num_cars": 1},
            {"exclusivity": True, "guests": 10},
            {"touchup_hours": 2},
        ]
    )
    dates = [DATE_1, DATE_2, "2026-06-22"]
    [result] = calculate_quote(makeup_only, form, None, prices, dates).calculations
    for day in result.day_breakdowns:
        assert _labels(day).count("Bridal MU") == 1


def test_global_lines_and_flattened_meta(makeup_only, make_form, prices):
    form = make_form(
        days=[{"travel_fee": 100, "num_people": 2, "num_cars": 1}],
        trials=2,
        trial_travel_enabled=True,
        trial_travel_fee=25,
        trial_venue="Sintra",
    )
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations

    assert [l.label for l in result.lines[:2]] == ["Trials", "Trial travel fee"]
    assert result.lines[0].total == Decimal("160")
    assert result.lines[1].meta == "Sintra"
    flattened = {l.label: l.meta for l in result.lines[2:]}
    assert flattened["Bridal MU"] == "20/06/2026"
    assert flattened["Assistant travel fee"] == "20/06/2026 • 35% × (people − cars)"
    # Day breakdown lines keep their own meta untouched
    assert _line(result.day_breakdowns[0], "Bridal MU").meta is None
    assert result.venue_notes == "Sintra"
    _assert_invariants(result, Decimal("185"))


def test_trial_travel_needs_toggle_and_fee(makeup_only, make_form, prices):
    disabled = make_form(days=[{}], trial_travel_enabled=False, trial_travel_fee=40)
    zero_fee = make_form(days=[{}], trial_travel_enabled=True, trial_travel_fee=0)
    for form in (disabled, zero_fee):
        [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
        assert all(l.label != "Trial travel fee" for l in result.lines)


def test_result_packaging(makeup_only, make_form, prices):
    form = make_form(artist="Rita", days=[{}], trial_venue="Lisbon studio")
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    assert result.artist_name == "Rita"
    assert result.service_type == ServiceType.MAKEUP
    assert result.payments == []
    assert result.total_paid == 0
    assert result.due == result.subtotal
    assert result.wedding_dates == [DATE_1]
    assert result.venue_notes == "Lisbon studio"


def test_makeup_then_hair_and_missing_form_skipped(make_form, prices):
    both = ServiceChoice(makeup=True, hair=True)
    makeup = make_form(days=[{}])
    hair = make_form(artist="Eric", days=[{}])

    quote = calculate_quote(both, makeup, hair, prices, [DATE_1])
    assert [c.service_type for c in quote.calculations] == [ServiceType.MAKEUP, ServiceType.HAIR]
    assert _labels(quote.calculations[1].day_breakdowns[0]) == ["Bridal H"]
    assert quote.grand_summary.grand_total == Decimal("220")

    only_makeup = calculate_quote(both, makeup, None, prices, [DATE_1])
    assert [c.service_type for c in only_makeup.calculations] == [ServiceType.MAKEUP]

    unselected = calculate_quote(ServiceChoice(), makeup, hair, prices, [DATE_1])
    assert unselected.calculations == []
    assert unselected.grand_summary.grand_total == 0


def test_odd_cent_assistant_fee_rounds_from_unrounded_unit(makeup_only, make_form, prices):
    form = make_form(days=[{"travel_fee": "33.33", "num_people": 4, "num_cars": 1}])
    [result] = calculate_quote(makeup_only, form, None, prices, [DATE_1]).calculations
    assistants = _line(result.day_breakdowns[0], "Assistant travel fee")
    assert assistants.unit == Decimal("11.67")
    assert assistants.total == Decimal("35.00")


def test_recalculation_is_deterministic(makeup_only, make_form, prices):
    form = make_form(
        days=[{"guests": 3, "travel_fee": 90, "num_people": 3, "num_cars": 2, "touchup_hours": 1}],
        trials=1,
    )
    first = calculate_quote(makeup_only, form, None, prices, [DATE_1])
    second = calculate_quote(makeup_only, form, None, prices, [DATE_1])
    assert first.model_dump_json() == second.model_dump_json()


def test_grand_summary_due_never_negative(makeup_only, make_form, prices):
    [result] = calculate_quote(makeup_only, make_form(days=[{}]), None, prices, [DATE_1]).calculations
    overpaid = apply_payments(result, [Payment(id="p1", date=DATE_1, amount=500)])

    summary = calculate_grand_summary([overpaid])
    assert summary.grand_total == Decimal("120")
    assert summary.total_paid == Decimal("500")
    assert summary.total_due == 0


@pytest.mark.parametrize("dates", [[DATE_1], [DATE_1, DATE_2]])
def test_per_day_totals_sum_services(make_form, prices, dates):
    both = ServiceChoice(makeup=True, hair=True)
    quote = calculate_quote(both, make_form(), make_form(artist="Eric"), prices, dates)
    totals = compute_per_day_totals(quote.calculations)
    assert [t.date for t in totals] == dates
    assert all(t.total == Decimal("220") for t in totals)

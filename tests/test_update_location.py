from collections.abc import Iterator
from datetime import datetime

import pytest

from mappify_address import Location, MappifyAddressError, MappifyVerifier, StreetAddressRecord
from tests.payloads import candidate


@pytest.fixture
def verifier(fixed_now: datetime) -> Iterator[MappifyVerifier]:
    v = MappifyVerifier(clock=lambda: fixed_now)
    yield v
    v.close()


def record(**kwargs: object) -> StreetAddressRecord:
    return StreetAddressRecord.model_validate(candidate(**kwargs))


def test_primary_candidate_splits_two_lines(verifier: MappifyVerifier, location: Location) -> None:
    verifier.update_location(location, record(street_address="12 Smith St, Unit 4", primary=True))

    assert location.street1 == "12 Smith St"
    assert location.street2 == "Unit 4"


def test_primary_candidate_ignores_extra_segments(
    verifier: MappifyVerifier, location: Location
) -> None:
    address = record(street_address="Level 2, 12 Smith St, Rear", primary=True)

    verifier.update_location(location, address)

    assert location.street1 == "Level 2"
    assert location.street2 == "12 Smith St"


def test_non_primary_candidate_clears_street2(verifier: MappifyVerifier, location: Location) -> None:
    verifier.update_location(location, record(street_address="12 Smith St, Unit 4", primary=False))

    assert location.street1 == "12 Smith St"
    assert location.street2 == ""


def test_empty_segments_are_dropped(verifier: MappifyVerifier, location: Location) -> None:
    verifier.update_location(location, record(street_address="12 Smith St, , Unit 4", primary=True))

    assert location.street2 == "Unit 4"


@pytest.mark.parametrize(
    ("suburb", "expected"),
    [
        ("FITZROY", "Fitzroy"),
        ("carlton north", "Carlton North"),
        ("bOX hILL sOUTH", "Box Hill South"),
        ("ST KILDA-EAST", "St Kilda-East"),
    ],
)
def test_suburb_is_title_cased(
    verifier: MappifyVerifier, location: Location, suburb: str, expected: str
) -> None:
    verifier.update_location(location, record(suburb=suburb))

    assert location.city == expected


def test_state_and_postcode_copied_verbatim(verifier: MappifyVerifier, location: Location) -> None:
    verifier.update_location(location, record(state="vic", post_code="3065"))

    assert location.state == "vic"
    assert location.postal_code == "3065"


def test_returns_geocoded_flag(
    verifier: MappifyVerifier, location: Location, fixed_now: datetime
) -> None:
    assert verifier.update_location(location, record()) is True
    assert location.standardized_date_time == fixed_now
    assert location.geocoded_date_time == fixed_now

    other = Location(street1="1 Main Rd")
    assert verifier.update_location(other, record(lat=None)) is False
    assert other.standardized_date_time == fixed_now
    assert other.geocoded_date_time is None


def test_malformed_primary_leaves_location_unchanged(
    verifier: MappifyVerifier, location: Location
) -> None:
    before = location.model_dump()

    with pytest.raises(MappifyAddressError):
        verifier.update_location(location, record(street_address="12 Smith St", primary=True))

    assert location.model_dump() == before


def test_changes_are_recorded_in_process_log(
    verifier: MappifyVerifier, location: Location
) -> None:
    verifier.update_location(location, record(street_address="12 Smith St"))

    changed = {entry.field for entry in location.process_log.cleaning}
    assert {"street1", "street2", "city", "state", "geo_point"} <= changed
    # postal code was already 3065
    assert "postal_code" not in changed
    assert location.audit_log(source="mappify")[0]["source"] == "mappify"

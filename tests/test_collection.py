import dataclasses
import io
import json
from datetime import date

import pytest

from nfip_status.csv_reader import CommunityStatusReader
from nfip_status.models.community_status import CommunityStatus
from nfip_status.models.community_status_collection import CommunityStatusCollection


@pytest.fixture
def communities():
    return CommunityStatusCollection([
        CommunityStatus(id=60001, name="Anaheim, City of", county="Orange County"),
        CommunityStatus(id=180001, name="Adams County", county="Indiana"),
        CommunityStatus(id=480287, name="Houston, City of", county="Harris County",
                        firm_identified=date(1970, 1, 1)),
    ])


def test_search_matches_name_and_county_case_insensitively(communities):
    result = communities.search("ana")

    assert [c.id for c in result] == [60001, 180001]


def test_search_matches_identifier_text(communities):
    assert [c.id for c in communities.search("0287")] == [480287]


def test_search_no_match_is_empty(communities):
    result = communities.search("99999")

    assert isinstance(result, CommunityStatusCollection)
    assert len(result) == 0


def test_search_does_not_mutate_source(communities):
    communities.search("houston")

    assert len(communities) == 3


def test_search_hits_cannot_be_modified(communities):
    hit = communities.search("ana")[0]

    with pytest.raises(dataclasses.FrozenInstanceError):
        hit.name = "CHANGED"

    assert communities[0].name == "Anaheim, City of"


def test_display_name():
    assert CommunityStatus(id=60001, name="Anaheim", county="Orange").display_name == "Anaheim, Orange (CID 60001)"
    assert CommunityStatus(id=7, name="Adak").display_name == "Adak (CID 7)"


def test_get_by_id_returns_duplicates(communities):
    doubled = CommunityStatusCollection(list(communities) + [communities[0]])

    assert len(doubled.get_by_id(60001)) == 2


def test_to_json_shape(communities):
    data = json.loads(communities.to_json())

    assert len(data) == 3
    assert data[0]["id"] == 60001
    assert data[0]["firm_identified"] is None
    assert data[2]["firm_identified"] == "1970-01-01"
    assert set(data[0]) == {
        "id", "name", "county", "flood_hazard_identified", "firm_identified",
        "current_effective_map_date", "regular_emergency_date", "tribal",
        "crs_entry_date", "current_effective_date", "current_class",
        "percent_discount_sfha", "percent_non_sfha", "program",
        "participating_community",
    }


def test_to_json_writes_to_stream(communities):
    buffer = io.StringIO()

    text = communities.export(buffer, indent=2)

    assert buffer.getvalue() == text + "\n"


def test_to_json_propagates_sink_errors(communities):
    class BrokenSink:
        def write(self, _):
            raise OSError("disk full")

    with pytest.raises(OSError):
        communities.to_json(BrokenSink())


def test_export_round_trip(write_status_book, make_row):
    path = write_status_book([
        make_row(),
        make_row(cid="", fhbm="N/A", tribal="maybe", name="INDIANA, TOWN OF"),
        make_row(cid='="480287"', curr_map="", participating="No"),
    ])
    loaded = CommunityStatusReader(path).read_all()

    exported = loaded.to_json()
    restored = CommunityStatusCollection.from_json(exported)

    assert len(json.loads(exported)) == 3
    assert restored == loaded
    assert restored[1].flood_hazard_identified is None


def test_statistics(communities):
    stats = communities.get_statistics()

    assert stats["total_records"] == 3
    assert stats["unique_communities"] == 3
    assert stats["by_program"] == {"UNKNOWN": 3}
    assert stats["dates_present"]["firm_identified"] == 1

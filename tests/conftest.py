import csv

import pytest

HEADER = [
    "CID", "Community Name", "County", "Init FHBM Identified", "Init FIRM Identified",
    "Curr Eff Map Date", "Reg-Emer Date", "Tribal", "CRS Entry Date",
    "Current Effective Date", "Current Class", "% Discount for SFHA",
    "% Discount for Non-SFHA", "Program", "Participating in NFIP",
]


def _make_row(cid='="060001"', name="ANAHEIM, CITY OF", county="ORANGE COUNTY",
             fhbm="04/12/74", firm="09/15/78", curr_map="12/03/09", reg_emer="09/15/78",
             tribal="No", crs_entry="10/01/92", curr_eff="10/01/17", cur_class="7",
             disc_sfha="15", disc_non_sfha="5", program="R", participating="Yes"):
    return [cid, name, county, fhbm, firm, curr_map, reg_emer, tribal, crs_entry,
            curr_eff, cur_class, disc_sfha, disc_non_sfha, program, participating]


@pytest.fixture
def write_status_book(tmp_path):
    """Write a status book CSV (header included) and return its path."""

    def _write(rows, name="nation.csv", header=HEADER):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def make_row():
    """Build a raw status book row, overriding any column by keyword."""
    return _make_row

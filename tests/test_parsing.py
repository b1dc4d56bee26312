import json

import pytest

from conftest import ADDR1, ADDR2
from help_allowlist.errors import InvalidAddress
from help_allowlist.parsing import dedupe_addresses, load_addresses, parse_addresses
from help_allowlist.service import compute_root_from_addresses


class TestNewlineText:
    def test_lines(self):
        assert parse_addresses(f"{ADDR1}\n{ADDR2}\n") == [ADDR1, ADDR2]

    def test_blank_lines_and_whitespace(self):
        assert parse_addresses(f"\n  {ADDR1}  \r\n\r\n{ADDR2}") == [ADDR1, ADDR2]

    def test_empty(self):
        assert parse_addresses("") == []
        assert parse_addresses("  \n\n") == []

    def test_comments_skipped(self):
        assert parse_addresses(f"# team wallets\n{ADDR1}") == [ADDR1]

    def test_invalid_rows_kept(self):
        assert parse_addresses(f"{ADDR1}\nnot-an-address") == [ADDR1, "not-an-address"]

    def test_byte_order_mark(self):
        assert parse_addresses("\ufeff" + ADDR1) == [ADDR1]

    def test_no_dedup(self):
        assert parse_addresses(f"{ADDR1}\n{ADDR1}") == [ADDR1, ADDR1]


class TestCsv:
    def test_header_skipped(self):
        text = f"address,quantity\n{ADDR1},2\n{ADDR2},1\n"
        assert parse_addresses(text) == [ADDR1, ADDR2]

    def test_address_not_first_column(self):
        text = f"name;wallet\nalice;{ADDR1}\nbob;{ADDR2}"
        assert parse_addresses(text) == [ADDR1, ADDR2]

    def test_quoted_cells(self):
        assert parse_addresses(f'"{ADDR1}","x"') == [ADDR1]

    def test_single_column_header(self):
        assert parse_addresses(f"wallet\n{ADDR1}") == [ADDR1]

    def test_every_address_on_a_row_kept(self):
        assert parse_addresses(f"{ADDR1},{ADDR2}") == [ADDR1, ADDR2]
        assert parse_addresses(f"wallet,backup\n{ADDR1};{ADDR2}\n{ADDR2},7") == [ADDR1, ADDR2, ADDR2]

    def test_mistyped_first_entry_kept(self):
        assert parse_addresses(f"alice\n{ADDR1}\n{ADDR2}") == ["alice", ADDR1, ADDR2]

    def test_unknown_header_kept(self):
        assert parse_addresses(f"name,qty\n{ADDR1},1") == ["name,qty", ADDR1]

    def test_header_without_data_kept(self):
        assert parse_addresses("address") == ["address"]

    def test_bad_row_rejected_by_service(self):
        with pytest.raises(InvalidAddress) as exc:
            compute_root_from_addresses(parse_addresses(f"alice\n{ADDR1}"))
        assert exc.value.invalid == [(0, "alice")]


class TestJson:
    def test_list_of_strings(self):
        assert parse_addresses(json.dumps([ADDR1, ADDR2])) == [ADDR1, ADDR2]

    def test_list_of_objects(self):
        text = json.dumps([{"address": ADDR1}, {"address": ADDR2, "qty": 3}])
        assert parse_addresses(text) == [ADDR1, ADDR2]

    def test_object_with_addresses(self):
        assert parse_addresses(json.dumps({"addresses": [ADDR2]})) == [ADDR2]

    def test_entry_without_address(self):
        with pytest.raises(ValueError):
            parse_addresses(json.dumps([{"wallet": ADDR1}]))

    def test_malformed(self):
        with pytest.raises(ValueError):
            parse_addresses("[0x12")


class TestFiles:
    def test_load(self, tmp_path):
        path = tmp_path / "allowlist.txt"
        path.write_text(f"{ADDR1}\n{ADDR2}\n")
        assert load_addresses(str(path)) == [ADDR1, ADDR2]


class TestDedupe:
    def test_first_spelling_wins(self):
        upper = "0x" + ADDR1[2:].upper()
        assert dedupe_addresses([upper, ADDR2, ADDR1]) == [upper, ADDR2]

    def test_prefix_ignored(self):
        assert dedupe_addresses([ADDR1, ADDR1[2:]]) == [ADDR1]

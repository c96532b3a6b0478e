from __future__ import annotations

from services.mapping import (
    FIELD_SPECS,
    FieldKind,
    coerce_integer,
    coerce_list,
    coerce_string,
    map_fields,
)
from utils.number_parsing import parse_leading_int


def test_integer_coercion():
    assert coerce_integer("") is None
    assert coerce_integer(None) is None
    assert coerce_integer("1950") == 1950
    assert coerce_integer("abc") is None


def test_integer_coercion_takes_leading_digits():
    assert coerce_integer("1950-03-02") == 1950
    assert coerce_integer(" 1912 (approx)") == 1912
    assert parse_leading_int("-12") == -12
    assert parse_leading_int("0") is None


def test_list_coercion():
    assert coerce_list("P1; P2;P3") == ["P1", "P2", "P3"]
    assert coerce_list("") == []
    assert coerce_list(" ; P1 ;; ") == ["P1"]


def test_string_coercion_trims():
    assert coerce_string("  Owen ") == "Owen"
    assert coerce_string(None) == ""


def test_missing_headers_degrade_to_empty_forms():
    person = map_fields({})
    assert person.id == ""
    assert person.first_name == ""
    assert person.birth_year is None
    assert person.spouse_ids == []
    assert person.name == ""


def test_name_prefers_full_name():
    person = map_fields({"First Name": "Mary", "Last Name": "Smith", "Full Name": "Mary Smith Owen"})
    assert person.name == "Mary Smith Owen"


def test_name_falls_back_to_first_and_last():
    assert map_fields({"First Name": "John", "Last Name": "Owen"}).name == "John Owen"
    assert map_fields({"Last Name": "Owen"}).name == "Owen"


def test_full_row_maps_every_kind():
    raw = {
        "Person ID": "P7",
        "First Name": "Thomas",
        "Birth Date": "1901",
        "Death Date": "unknown",
        "Age at Death": "",
        "Children IDs": "P8;P9",
        "Branch": "Navy",
        "Employeers": "Pennsylvania Railroad",
        "Undergad Year Graduated": "1923",
    }
    person = map_fields(raw)
    assert person.id == "P7"
    assert person.birth_year == 1901
    assert person.death_year is None
    assert person.age_at_death is None
    assert person.children_ids == ["P8", "P9"]
    assert person.military_branch == "Navy"
    assert person.employers == "Pennsylvania Railroad"
    # Year columns outside the integer set stay text
    assert person.undergrad_year == "1923"


def test_field_specs_cover_record_fields():
    targets = [spec.target_key for spec in FIELD_SPECS]
    assert len(targets) == len(set(targets))
    dumped = map_fields({}).model_dump(by_alias=True)
    # Every record key comes from the table, except the derived display name
    assert set(dumped) == set(targets) | {"name"}
    kinds = {spec.target_key: spec.kind for spec in FIELD_SPECS}
    assert kinds["birthYear"] is FieldKind.INTEGER
    assert kinds["siblingIds"] is FieldKind.LIST


def test_overlong_digit_run_degrades_to_none():
    # Longer than int() will convert on current interpreters; must not raise
    assert parse_leading_int("9" * 5000) is None
    person = map_fields({"Person ID": "P1", "Birth Date": "9" * 5000})
    assert person.id == "P1"
    assert person.birth_year is None


def test_zero_cell_is_documented_on_integer_fields():
    from models import PersonRecord

    assert coerce_integer("0") is None
    for field_name in ("birth_year", "death_year", "age_at_death", "immigration_year", "generation_number"):
        assert "0" in PersonRecord.model_fields[field_name].description


def test_digit_run_length_bound():
    assert parse_leading_int("1" * 18) == int("1" * 18)
    assert parse_leading_int("1" * 19) is None

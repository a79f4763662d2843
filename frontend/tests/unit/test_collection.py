from __future__ import annotations

from conftest import make_employee

from staffboard.services.collection import EmployeeCollection


def test_append_then_remove_restores_collection(sample_employees):
    collection = EmployeeCollection(sample_employees)
    before = collection.records

    record = make_employee(id=99, name="New Hire")
    collection.append(record)
    assert len(collection) == 4

    assert collection.remove_one(record.id) is True
    assert collection.records == before


def test_replace_one_swaps_record_in_place(sample_employees):
    collection = EmployeeCollection(sample_employees)
    updated = make_employee(id=2, name="Grace Brewster Hopper", salary=130000)

    assert collection.replace_one(2, updated) is True

    assert [r.id for r in collection.records] == [1, 2, 3]
    assert collection.find(2).name == "Grace Brewster Hopper"


def test_unknown_id_is_a_noop(sample_employees):
    collection = EmployeeCollection(sample_employees)
    before = collection.records

    assert collection.replace_one(42, make_employee(id=42)) is False
    assert collection.remove_one(42) is False
    assert collection.records == before


def test_find_matches_text_ids(sample_employees):
    collection = EmployeeCollection(sample_employees)
    assert collection.find("3").name == "alan Turing"
    assert collection.find("nope") is None


def test_replace_all_resets_load_failure(sample_employees):
    collection = EmployeeCollection()
    collection.load_failed = True

    collection.replace_all(sample_employees)

    assert collection.load_failed is False
    assert len(collection) == 3


def test_records_are_read_only_snapshot(sample_employees):
    collection = EmployeeCollection(sample_employees)
    snapshot = collection.records
    collection.remove_one(1)
    assert len(snapshot) == 3
    assert len(collection) == 2


def test_edit_target_lifecycle(sample_employees):
    collection = EmployeeCollection(sample_employees)
    assert collection.edit_target is None
    assert collection.editing is False

    assert collection.begin_edit("2").id == 2
    assert collection.edit_target == 2
    assert collection.editing is True

    collection.begin_create()
    assert collection.edit_target is None

    collection.begin_edit(1)
    collection.end_edit()
    assert collection.edit_target is None


def test_begin_edit_unknown_id_keeps_target(sample_employees):
    collection = EmployeeCollection(sample_employees)
    collection.begin_edit(1)

    assert collection.begin_edit(404) is None
    assert collection.edit_target == 1

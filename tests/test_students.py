import pytest

from dsakit.students import RECORD_SIZE, Student, StudentFile


def _class_list():
    return [
        Student(1, "Asha", "A", "12 Main Road"),
        Student(2, "Ravi", "B", "4 Lake View"),
        Student(3, "Meera", "A", "9 Hill Street"),
    ]


def test_record_size_matches_layout():
    assert RECORD_SIZE == 156
    assert len(_class_list()[0].pack()) == RECORD_SIZE


def test_pack_unpack_round_trip():
    for student in _class_list():
        assert Student.unpack(student.pack()) == student


def test_long_fields_are_truncated():
    student = Student(5, "n" * 70, "C", "a" * 150)
    back = Student.unpack(student.pack())
    assert back.name == "n" * 49
    assert back.address == "a" * 99


def test_division_must_be_one_character():
    with pytest.raises(ValueError):
        Student(1, "Asha", "AB", "x").pack()
    with pytest.raises(ValueError):
        Student(1, "Asha", "", "x").pack()


def test_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        Student.unpack(b"\0" * 10)


def test_add_find_and_iterate(tmp_path):
    store = StudentFile(tmp_path)
    for student in _class_list():
        store.add(student)
    assert list(store) == _class_list()
    assert store.find(2) == _class_list()[1]


def test_find_missing_raises(tmp_path):
    store = StudentFile(tmp_path)
    store.add(_class_list()[0])
    with pytest.raises(KeyError):
        store.find(7)


def test_delete(tmp_path):
    store = StudentFile(tmp_path)
    for student in _class_list():
        store.add(student)
    store.delete(2)
    assert [s.roll for s in store] == [1, 3]
    with pytest.raises(KeyError):
        store.find(2)


def test_delete_missing_raises_and_keeps_records(tmp_path):
    store = StudentFile(tmp_path)
    for student in _class_list():
        store.add(student)
    with pytest.raises(KeyError):
        store.delete(99)
    assert list(store) == _class_list()


def test_empty_file_iterates_nothing(tmp_path):
    assert list(StudentFile(tmp_path)) == []
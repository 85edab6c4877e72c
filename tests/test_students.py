import pytest

from dsakit.students import RECORD_SIZE, Student, StudentFile


@pytest.fixture
def store(tmp_path):
    return StudentFile(tmp_path / "student.txt")


def test_pack_layout():
    data = Student("ann", 7, "A").pack()
    assert len(data) == RECORD_SIZE == 16
    assert data == b"\x07\x00\x00\x00Aann" + b"\x00" * 8


def test_pack_round_trip():
    student = Student("bob", 12, "B")
    assert Student.unpack(student.pack()) == student


def test_long_name_rejected():
    with pytest.raises(ValueError):
        Student("abcdefghij", 1, "A").pack()


def test_bad_division_rejected():
    with pytest.raises(ValueError):
        Student("ann", 1, "AB").pack()


def test_unpack_wrong_size():
    with pytest.raises(ValueError):
        Student.unpack(b"\x00" * 5)


def test_str_matches_display():
    assert str(Student("ann", 7, "A")) == "Name:ann\nRoll no:7\nDiv:A"


def test_write_and_read(store):
    students = [Student("ann", 1, "A"), Student("bob", 2, "B")]
    store.write_all(students)
    assert store.read_all() == students


def test_read_missing_file(store):
    assert store.read_all() == []


def test_write_replaces(store):
    store.write_all([Student("ann", 1, "A")])
    store.write_all([Student("cy", 3, "C")])
    assert store.read_all() == [Student("cy", 3, "C")]


def test_append(store):
    store.write_all([Student("ann", 1, "A")])
    store.append([Student("bob", 2, "B")])
    assert [s.roll for s in store.read_all()] == [1, 2]


def test_search(store):
    store.write_all([Student("ann", 1, "A"), Student("bob", 2, "B")])
    assert store.search(2) == [Student("bob", 2, "B")]
    with pytest.raises(KeyError):
        store.search(9)


def test_delete(store):
    store.write_all([Student("ann", 1, "A"), Student("bob", 2, "B"), Student("cy", 3, "C")])
    assert store.delete(2) == [Student("bob", 2, "B")]
    assert [s.roll for s in store.read_all()] == [1, 3]


def test_delete_missing_keeps_records(store):
    store.write_all([Student("ann", 1, "A")])
    with pytest.raises(KeyError):
        store.delete(5)
    assert store.read_all() == [Student("ann", 1, "A")]
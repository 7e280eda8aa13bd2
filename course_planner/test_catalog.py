import io

import pytest

from course_planner.catalog import CatalogLoader, load_courses
from course_planner.errors import CatalogError, DanglingPrerequisite, MalformedLine, SourceUnreadable
from course_planner.store import OrderedCourseStore

SAMPLE = """CSCI100,Introduction to Computer Science
CSCI101,Introduction to Programming in C++,CSCI100
CSCI200,Data Structures,CSCI101
MATH201,Discrete Mathematics
CSCI300,Introduction to Algorithms,CSCI200,MATH201
"""


@pytest.fixture
def store():
    return OrderedCourseStore()


@pytest.fixture
def loaded_store():
    s = OrderedCourseStore()
    load_courses(["CSCI050,Computing Basics"], s)
    return s


@pytest.fixture
def course_path(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def snapshot(store):
    return [(c.identifier, c.title, c.prerequisites) for c in store.in_order()]


def test_scenario_two_courses(store):
    count = CatalogLoader().load(["CS101,Intro to CS", "CS201,Data Structures,CS101"], store)

    assert count == 2
    assert [c.identifier for c in store] == ["CS101", "CS201"]
    assert store.search("CS201").prerequisites == ("CS101",)


def test_dangling_prerequisite_rejects_batch(store):
    with pytest.raises(DanglingPrerequisite) as exc:
        CatalogLoader().load(["CS201,Data Structures,CS999"], store)

    assert exc.value.course == "CS201"
    assert exc.value.missing == "CS999"
    assert "CS999" in exc.value.message
    assert store.is_empty()


def test_single_field_line_is_malformed(loaded_store):
    before = snapshot(loaded_store)
    with pytest.raises(MalformedLine) as exc:
        CatalogLoader().load(["CS101"], loaded_store)

    assert exc.value.line_number == 1
    assert snapshot(loaded_store) == before


def test_failed_load_leaves_existing_courses_untouched(loaded_store):
    before = snapshot(loaded_store)
    lines = SAMPLE.splitlines() + ["CSCI400,Large Software Development,CSCI350"]

    with pytest.raises(DanglingPrerequisite):
        load_courses(lines, loaded_store)

    assert snapshot(loaded_store) == before
    assert not loaded_store.search("CSCI100").found


def test_dangling_reference_anywhere_rejects_courses_without_prereqs(store):
    lines = ["CSCI100,Intro", "CSCI300,Algorithms,CSCI200", "MATH201,Discrete Mathematics"]
    with pytest.raises(DanglingPrerequisite):
        load_courses(lines, store)
    assert len(store) == 0


def test_malformed_line_number_counts_blank_lines(store):
    lines = ["CSCI100,Intro", "", "   ", "CSCI200"]
    with pytest.raises(MalformedLine) as exc:
        load_courses(lines, store)
    assert exc.value.line_number == 4
    assert store.is_empty()


@pytest.mark.parametrize("line", [",Missing Number", "CSCI100,", "CSCI100, ,CSCI050"])
def test_blank_number_or_title_is_malformed(store, line):
    with pytest.raises(MalformedLine):
        load_courses([line], store)


def test_fields_trimmed_and_blank_prereqs_dropped(store):
    lines = ["  CSCI100 ,  Intro to CS  ", "CSCI200 , Data Structures , CSCI100 , ,", ""]
    assert load_courses(lines, store) == 2

    record = store.search("CSCI200")
    assert record.title == "Data Structures"
    assert record.prerequisites == ("CSCI100",)


def test_duplicate_prerequisites_kept(store):
    load_courses(["A,Alpha", "B,Beta,A,A"], store)
    assert store.search("B").prerequisites == ("A", "A")


def test_prerequisite_may_appear_later_in_file(store):
    assert load_courses(["CSCI300,Algorithms,CSCI200", "CSCI200,Data Structures"], store) == 2


def test_valid_batch_count_matches_listing(store):
    lines = SAMPLE.splitlines()
    count = load_courses(lines, store)

    assert count == len(lines)
    assert len(list(store.in_order())) == len(lines)


def test_load_from_file(tmp_path, store):
    path = tmp_path / "courses.csv"
    path.write_text(SAMPLE.replace("\n", "\r\n"), encoding="utf-8")

    assert load_courses(path, store) == 5
    assert load_courses(str(path), OrderedCourseStore()) == 5
    assert store.search("CSCI300").prerequisites == ("CSCI200", "MATH201")
    assert store.search("CSCI300").title == "Introduction to Algorithms"


def test_load_from_stream(store):
    assert load_courses(io.StringIO(SAMPLE), store) == 5
    assert [c.identifier for c in store][:2] == ["CSCI100", "CSCI101"]


def test_missing_file_is_unreadable(tmp_path, store):
    path = tmp_path / "nope.csv"
    with pytest.raises(SourceUnreadable) as exc:
        load_courses(path, store)

    assert exc.value.source == str(path)
    assert isinstance(exc.value, CatalogError)
    assert store.is_empty()


def test_undecodable_file_is_unreadable(tmp_path, store):
    path = tmp_path / "binary.csv"
    path.write_bytes(b"CSCI100,\xff\xfe\xfa\n")
    with pytest.raises(SourceUnreadable):
        load_courses(path, store)


def test_closed_stream_is_unreadable(course_path, loaded_store):
    before = snapshot(loaded_store)
    f = open(course_path, encoding="utf-8")
    f.close()
    with pytest.raises(SourceUnreadable) as exc:
        load_courses(f, loaded_store)

    assert exc.value.source == str(course_path)
    assert snapshot(loaded_store) == before


def test_binary_stream_is_unreadable(course_path, store):
    with pytest.raises(SourceUnreadable) as exc:
        load_courses(io.BytesIO(b"CS101,Intro\n"), store)
    assert "expected text lines" in exc.value.message

    with open(course_path, "rb") as f:
        with pytest.raises(SourceUnreadable):
            load_courses(f, store)
    assert store.is_empty()


def test_stream_failing_midway_is_unreadable(loaded_store):
    def lines():
        yield "CSCI100,Intro to CS"
        yield "CSCI200,Data Structures,CSCI100"
        raise OSError("connection reset")

    before = snapshot(loaded_store)
    with pytest.raises(SourceUnreadable) as exc:
        load_courses(lines(), loaded_store)

    assert "connection reset" in exc.value.message
    assert snapshot(loaded_store) == before
    assert not loaded_store.search("CSCI100").found


def test_custom_delimiter(store):
    loader = CatalogLoader(delimiter="\t")
    assert loader.load(["CSCI100\tIntro, Part 1", "CSCI200\tNext\tCSCI100"], store) == 2
    assert store.search("CSCI100").title == "Intro, Part 1"


def test_parse_and_validate_do_not_touch_store():
    loader = CatalogLoader()
    courses = loader.parse(SAMPLE.splitlines())
    loader.validate(courses)
    assert [c.identifier for c in courses][0] == "CSCI100"
    assert len(courses) == 5

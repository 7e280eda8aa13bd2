import logging
import os
from typing import Iterable, List

from course_planner.course import CourseRecord
from course_planner.errors import DanglingPrerequisite, MalformedLine, SourceUnreadable
from course_planner.store import OrderedCourseStore

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads a comma separated course file into an OrderedCourseStore.

    Each non-empty line is ``number,title[,prereq...]``. The whole batch is
    parsed and checked before anything is inserted, so a bad line or an
    unknown prerequisite leaves the store exactly as it was.
    """

    def __init__(self, delimiter=","):
        self.delimiter = delimiter

    def read_lines(self, source) -> List[str]:
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            try:
                with open(path, encoding="utf-8-sig") as f:
                    return f.read().splitlines()
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Could not open file {path}: {e}")
                raise SourceUnreadable(path, str(e)) from e

        name = str(getattr(source, "name", type(source).__name__))
        lines = []
        try:
            for line in source:
                if not isinstance(line, str):
                    logger.error(f"Could not read from {name}: got {type(line).__name__} instead of text")
                    raise SourceUnreadable(name, "expected text lines")
                lines.append(line.rstrip("\r\n"))
        # ValueError covers closed files
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.error(f"Could not read from {name}: {e}")
            raise SourceUnreadable(name, str(e)) from e
        return lines

    def parse_line(self, line: str, line_number: int) -> CourseRecord:
        parts = [part.strip() for part in line.split(self.delimiter)]
        if len(parts) < 2 or not parts[0] or not parts[1]:
            logger.error(f"Line {line_number} has insufficient data: {line!r}")
            raise MalformedLine(line_number)

        number, title = parts[0], parts[1]
        prereqs = tuple(p for p in parts[2:] if p)  # trailing commas leave blanks
        return CourseRecord(identifier=number, title=title, prerequisites=prereqs)

    def parse(self, lines: Iterable[str]) -> List[CourseRecord]:
        courses = []
        for line_number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            courses.append(self.parse_line(line, line_number))
        return courses

    def validate(self, courses: List[CourseRecord]) -> None:
        known = {course.identifier for course in courses}
        for course in courses:
            for prereq in course.prerequisites:
                if prereq not in known:
                    logger.error(f"Prerequisite {prereq} for course {course.identifier} does not exist")
                    raise DanglingPrerequisite(course.identifier, prereq)

    def load(self, source, store: OrderedCourseStore) -> int:
        """Parse, validate and commit ``source`` into ``store``.

        ``source`` is a path, an open text stream or any iterable of lines.
        Returns the number of courses inserted. Raises SourceUnreadable,
        MalformedLine or DanglingPrerequisite, in which case nothing has been
        inserted.
        """
        lines = self.read_lines(source)
        logger.info(f"Loading course data ({len(lines)} lines)")

        courses = self.parse(lines)
        self.validate(courses)

        for course in courses:
            store.insert(course)

        logger.info(f"Successfully loaded {len(courses)} courses")
        return len(courses)


def load_courses(source, store: OrderedCourseStore) -> int:
    return CatalogLoader().load(source, store)

"""
ABCU course planner.

- course: the CourseRecord model
- store: OrderedCourseStore, a binary search tree keyed on course number
- catalog: CatalogLoader, validated all-or-nothing loading from course files
- main: the interactive menu
"""

from course_planner.catalog import CatalogLoader, load_courses
from course_planner.course import CourseRecord
from course_planner.errors import CatalogError, DanglingPrerequisite, MalformedLine, SourceUnreadable
from course_planner.store import OrderedCourseStore

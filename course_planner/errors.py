class CatalogError(Exception):
    """Base exception for catalog load errors"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class SourceUnreadable(CatalogError):
    """The batch source could not be opened or read"""
    def __init__(self, source: str, reason: str = ""):
        self.source = source
        message = f"Could not open file {source}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedLine(CatalogError):
    """A line is missing its course number or title"""
    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(
            f"Line {line_number} has insufficient data. "
            "Each line must have at least course number and title"
        )


class DanglingPrerequisite(CatalogError):
    """A prerequisite refers to a course that is not in the batch"""
    def __init__(self, course: str, missing: str):
        self.course = course
        self.missing = missing
        super().__init__(f"Prerequisite {missing} for course {course} does not exist")

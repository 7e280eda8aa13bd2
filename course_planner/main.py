import argparse
import logging

from course_planner import config
from course_planner.catalog import load_courses
from course_planner.errors import CatalogError
from course_planner.logger import setup_global_exception_handler, setup_logging
from course_planner.store import OrderedCourseStore

logger = logging.getLogger(__name__)

MENU = """
========================================
Welcome to the course planner.
========================================
  1. Load Data Structure
  2. Print Course List
  3. Print Course

  9. Exit
========================================"""


def normalize_course_number(text):
    # Cut at the first comma or space, so "csci300, Intro" still finds CSCI300
    text = text.strip()
    for separator in (",", " "):
        end = text.find(separator)
        if end != -1:
            text = text[:end]
    return text.strip().upper()


def load_into(store, filename):
    print(f"Loading course data from {filename}...")
    try:
        count = load_courses(filename, store)
    except CatalogError as e:
        print(f"Error: {e.message}")
        return False
    print(f"Successfully loaded {count} courses.")
    return True


def print_course_list(store):
    print("\nHere is a sample schedule:\n")
    for course in store.in_order():
        print(f"{course.identifier}, {course.title}")


def print_course(store, query):
    number = normalize_course_number(query)
    course = store.search(number)
    if not course.found:
        print(f"Course {number} not found.")
        return False

    print(f"{course.identifier},{course.title}")
    if course.prerequisites:
        print(f"Prerequisites: {', '.join(course.prerequisites)}")
    else:
        print("Prerequisites: None")
    return True


def run_menu(store, data_loaded=False):
    while True:
        print(MENU)
        try:
            raw = input("What would you like to do? ")
        except EOFError:
            print()
            break

        try:
            choice = int(raw.strip())
        except ValueError:
            print("\nInvalid input. Please enter a number.")
            continue

        try:
            if choice == 1:
                filename = input("Enter the file name: ").strip() or config.DATA_FILE
                if load_into(store, filename):
                    data_loaded = True
            elif choice in (2, 3) and not data_loaded:
                print("\nError: No data loaded. Please load data first (Option 1).")
            elif choice == 2:
                print_course_list(store)
            elif choice == 3:
                query = input("What course do you want to know about? (Enter course number): ")
                print()
                print_course(store, query)
            elif choice == 9:
                print("\nThank you for using the course planner!")
                break
            else:
                print(f"\n{choice} is not a valid option.")
        except EOFError:
            print()
            break

    return data_loaded


def main(argv=None):
    parser = argparse.ArgumentParser(description="Browse the ABCU computer science course catalog.")
    parser.add_argument("--file", help="Course file to load before showing the menu")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    args = parser.parse_args(argv)

    setup_logging(config.get_log_level(args.log_level), config.LOG_FILE, console=config.DEBUG_MODE)
    setup_global_exception_handler()

    store = OrderedCourseStore()
    print("\nABCU Course Planner")

    data_loaded = False
    if args.file:
        data_loaded = load_into(store, args.file)

    run_menu(store, data_loaded)
    logger.info(f"Exiting with {len(store)} courses in the catalog")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from course_planner.main import main

raise SystemExit(main())

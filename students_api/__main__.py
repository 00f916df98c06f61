from students_api.main import main

raise SystemExit(main())

from expense_tracker.menu import main

raise SystemExit(main())

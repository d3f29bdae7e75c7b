from commit_notifier.main import main

raise SystemExit(main())

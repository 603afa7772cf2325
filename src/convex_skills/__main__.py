from convex_skills.cli.main import main

raise SystemExit(main())

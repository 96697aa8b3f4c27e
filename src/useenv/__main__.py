from useenv.cli import main

raise SystemExit(main())

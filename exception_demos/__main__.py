from exception_demos.cli import main

raise SystemExit(main())

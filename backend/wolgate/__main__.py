from wolgate.cli import main

raise SystemExit(main())

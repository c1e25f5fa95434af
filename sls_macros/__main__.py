from sls_macros.cli import main

raise SystemExit(main())

from filepress.cli import main


raise SystemExit(main())

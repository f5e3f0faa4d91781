from crcfile.cli.main import main

raise SystemExit(main())

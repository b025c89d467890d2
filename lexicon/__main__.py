from lexicon.cli.main import main

raise SystemExit(main())

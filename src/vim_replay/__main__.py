from vim_replay.cli import main

raise SystemExit(main())

from turtle_graphics.cli import main

raise SystemExit(main())

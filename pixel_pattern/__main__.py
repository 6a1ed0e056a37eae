from pixel_pattern.cli import main

raise SystemExit(main())

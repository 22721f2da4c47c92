from rental_space.cli import main

raise SystemExit(main())

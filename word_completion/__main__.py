from word_completion.cli.cli import main

raise SystemExit(main())

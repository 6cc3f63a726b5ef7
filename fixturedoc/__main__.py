from fixturedoc.cli import main

main()

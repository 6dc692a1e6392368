from eeholidays.cli import main

main()

from pathwise.cli.main import main

main()

from oodnotes.cli.main import main

main()

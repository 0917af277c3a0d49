from firstseen.cli import main

main()

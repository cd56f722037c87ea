from stylecheck.cli import main

main()

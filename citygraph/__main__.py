from .menu import main

main()

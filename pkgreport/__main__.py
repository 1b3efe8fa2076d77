from pkgreport.cli import main

main()

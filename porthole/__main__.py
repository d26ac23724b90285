from porthole.main import main

main()

from djsh.main import main

main()

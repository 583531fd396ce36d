from time_service.server import main

main()

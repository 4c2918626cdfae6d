from hostel_service.main import main

main()

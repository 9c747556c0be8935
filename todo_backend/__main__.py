from todo_backend.app import main

main()

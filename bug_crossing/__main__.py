from bug_crossing.main import main

main()

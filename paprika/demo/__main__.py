from paprika.demo.main import main

main()

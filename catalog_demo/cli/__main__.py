from catalog_demo.cli import main

main()

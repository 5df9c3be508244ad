from gitops_demo.server import main

main()

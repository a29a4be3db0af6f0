from bill_manager.orchestrator import main

main()

from zen_engine.adapters.textual.app import main

main()

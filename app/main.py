"""
Terminal Frontend for Bill Manager

This is the script a user runs to manage the bills of one session:

    python app/main.py

DESIGN PRINCIPLES:
1. One prompt per line of input
2. An empty line always takes you back (at the menu, it quits)
3. Clear status messages after every action
4. Diagnostics go to stderr, never mixed into the menu

Everything here is delegated to the orchestrator, which is also exposed as
the `bill-manager` console script and `python -m bill_manager`.
"""

from bill_manager.orchestrator import main


if __name__ == "__main__":
    main()

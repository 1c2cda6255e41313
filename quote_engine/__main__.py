"""Allow running as: python -m quote_engine"""

from quote_engine.main import main

if __name__ == "__main__":
    main()

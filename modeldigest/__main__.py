"""Entry point for running modeldigest as a module: python -m modeldigest.

This enables:
    python -m modeldigest digest ./my-model
    python -m modeldigest manifest ./my-model --json
"""

from modeldigest.api.cli.main import main

if __name__ == "__main__":
    main()

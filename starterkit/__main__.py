"""Allow ``python -m starterkit [project-name]``."""

from starterkit.setup.app_runner import main

if __name__ == "__main__":
    main()

"""
Entry point for running the Media Stream Service as a module.
"""

from .main import main

if __name__ == "__main__":
    main()

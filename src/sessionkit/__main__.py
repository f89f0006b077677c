"""Entry point for 'python -m sessionkit' command."""

from sessionkit.cli import main

if __name__ == "__main__":
    main()

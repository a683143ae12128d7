"""Entry point for running bigmama_starter as a module.

This allows running the application with:
    python -m bigmama_starter init [OPTIONS]
"""

from bigmama_starter.cli import app

if __name__ == "__main__":
    app()

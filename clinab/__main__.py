"""Allow ``python -m clinab``."""

from clinab.interface.cli import app

if __name__ == "__main__":
    app(prog_name="clinab")

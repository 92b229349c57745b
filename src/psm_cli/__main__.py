# psm_cli/__main__.py
from psm_cli.main import cli

if __name__ == "__main__":
    cli()

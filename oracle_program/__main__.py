"""Allow ``python -m oracle_program``."""
from .cli import main

main()

"""Allow running the packager with ``python -m barclamp_packager``."""

from .cli import main

main()

"""Allow ``python -m initializr_wizard``."""

from initializr_wizard.cli.main import main

main()

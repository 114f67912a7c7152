"""Allow running as ``python -m ossrh_release``"""

from .cli.main import main

main()

import sys

from uxguard.cli.main import main

sys.exit(main())

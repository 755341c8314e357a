import sys

from bladeview.console import main

sys.exit(main())

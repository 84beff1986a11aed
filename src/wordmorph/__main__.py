"""Allow `python -m wordmorph`."""

import sys

from wordmorph import main

sys.exit(main())

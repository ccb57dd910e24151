"""Entry point - run with: python -m quotegen"""

import sys

from quotegen.main import main

sys.exit(main())

import sys

from .deployments import main

sys.exit(main())

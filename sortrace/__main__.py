import sys

from sortrace.app import main

sys.exit(main())

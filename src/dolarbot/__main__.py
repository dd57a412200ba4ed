import sys

from dolarbot.app import main

sys.exit(main())

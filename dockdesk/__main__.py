import sys

from dockdesk.main import main

sys.exit(main())

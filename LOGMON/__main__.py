import sys

from LOGMON.main import main

sys.exit(main())

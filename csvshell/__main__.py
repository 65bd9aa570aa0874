import sys
from csvshell.main import main

sys.exit(main())

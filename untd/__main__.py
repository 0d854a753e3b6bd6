import sys

from untd.main import main

sys.exit(main())

import sys

from booker.main import main

sys.exit(main())

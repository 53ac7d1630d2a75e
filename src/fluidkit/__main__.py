import sys

from fluidkit.main import main

sys.exit(main())

import sys

from langres.cli import main

sys.exit(main())

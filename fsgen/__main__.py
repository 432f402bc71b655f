import sys

from fsgen.cli import main

sys.exit(main())
